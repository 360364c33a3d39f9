from wishlist_service.app import create_app

__all__ = ['create_app']
