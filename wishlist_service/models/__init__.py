from wishlist_service.models.base import isoformat_utc, new_id, utcnow
from wishlist_service.models.user import User
from wishlist_service.models.wishlist_item import WishlistItem
from wishlist_service.models.price_history import ProductPriceHistory

__all__ = ['isoformat_utc', 'new_id', 'utcnow', 'User', 'WishlistItem', 'ProductPriceHistory']
