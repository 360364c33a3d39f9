"""
Wishlist Store
Per-user wishlist CRUD. Every call except count_interested is scoped to the
caller's phone.
"""

from wishlist_service.errors import AuthorizationError, DuplicateError, NotFoundError, ValidationError
from wishlist_service.models import WishlistItem, new_id, utcnow


class WishlistStore:

    def __init__(self, storage):
        self.storage = storage

    def add(self, phone, merchant_id, product_id):
        if not merchant_id or not product_id:
            raise ValidationError('Merchant ID and Product ID are required')

        def add_item(store):
            if store.find_wishlist_item(phone, merchant_id, product_id):
                raise DuplicateError()
            # Column defaults only apply on flush and the memory store never flushes
            item = WishlistItem(
                id=new_id(),
                phone=phone,
                merchant_id=merchant_id,
                product_id=product_id,
                added_at=utcnow(),
            )
            return store.add_wishlist_item(item)

        return self.storage.run('add wishlist item', add_item)

    def list_all(self, phone):
        return self.storage.run('list wishlist', lambda store: store.wishlist_items(phone))

    def list_by_merchant(self, phone, merchant_id):
        if not merchant_id:
            raise ValidationError('Merchant ID is required')
        return self.storage.run(
            'list wishlist by merchant',
            lambda store: store.wishlist_items(phone, merchant_id=merchant_id),
        )

    def remove(self, phone, item_id):
        def remove_item(store):
            item = store.get_wishlist_item(item_id)
            if item is None:
                raise NotFoundError('Wishlist item not found')
            if item.phone != phone:
                raise AuthorizationError()
            store.delete_wishlist_item(item)
            return 'Wishlist item removed'

        # Items written during a database outage live only in memory
        return self.storage.run('remove wishlist item', remove_item, fall_through_on=(NotFoundError,))

    def count_interested(self, product_id):
        if not product_id:
            raise ValidationError('Product ID is required')
        phones = self.storage.run('count interested', lambda store: store.interested_phones(product_id))
        return len(phones)
