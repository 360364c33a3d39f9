from wishlist_service.storage.fallback import StorageFallback
from wishlist_service.storage.memory_store import MemoryStore
from wishlist_service.storage.sql_store import SqlStore

__all__ = ['StorageFallback', 'MemoryStore', 'SqlStore']
