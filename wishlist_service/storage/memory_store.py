"""
In-process storage used when the database is unreachable.
Holds the same model objects as the durable store, detached from any session.
Contents live for the lifetime of the process only.
"""

from wishlist_service.errors import DuplicateError


def _newest_first(records, key):
    # Reverse first so records sharing a timestamp come back newest insert first
    return sorted(reversed(records), key=key, reverse=True)


class MemoryStore:
    name = 'memory'

    def __init__(self):
        self.users = []
        self.price_observations = []
        self.wishlist = []

    def is_available(self):
        return True

    def find_user(self, phone):
        return next((u for u in self.users if u.phone == phone), None)

    def add_user(self, user):
        self.users.append(user)
        return user

    def add_price(self, observation):
        self.price_observations.append(observation)
        return observation

    def price_history(self, product_id):
        entries = [o for o in self.price_observations if o.product_id == product_id]
        return _newest_first(entries, key=lambda o: o.timestamp)

    def find_wishlist_item(self, phone, merchant_id, product_id):
        return next(
            (
                item for item in self.wishlist
                if item.phone == phone
                and item.merchant_id == merchant_id
                and item.product_id == product_id
            ),
            None,
        )

    def add_wishlist_item(self, item):
        if self.find_wishlist_item(item.phone, item.merchant_id, item.product_id):
            raise DuplicateError()
        self.wishlist.append(item)
        return item

    def wishlist_items(self, phone, merchant_id=None):
        items = [
            item for item in self.wishlist
            if item.phone == phone and (merchant_id is None or item.merchant_id == merchant_id)
        ]
        return _newest_first(items, key=lambda item: item.added_at)

    def get_wishlist_item(self, item_id):
        return next((item for item in self.wishlist if item.id == item_id), None)

    def delete_wishlist_item(self, item):
        self.wishlist.remove(item)

    def interested_phones(self, product_id):
        return {item.phone for item in self.wishlist if item.product_id == product_id}
