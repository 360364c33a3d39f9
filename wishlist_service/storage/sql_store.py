"""
Durable storage backed by Flask-SQLAlchemy.
Every SQLAlchemy failure is rolled back and re-raised as StorageUnavailableError
so the fallback coordinator can switch to the in-memory store.
"""

import functools
import logging
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from wishlist_service.errors import DuplicateError, StorageUnavailableError
from wishlist_service.models import ProductPriceHistory, User, WishlistItem

logger = logging.getLogger(__name__)


def _translate_errors(method):
    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as e:
            self.db.session.rollback()
            raise StorageUnavailableError(str(e)) from e
    return wrapper


class SqlStore:
    name = 'database'

    def __init__(self, database):
        self.db = database
        self.connected = False

    def is_available(self):
        return self.connected

    def connect(self):
        """Create tables and probe the connection. Must run inside an app context."""
        try:
            self.db.create_all()
            self.db.session.execute(text('SELECT 1'))
            self.connected = True
            logger.info("Database connected successfully")
        except SQLAlchemyError as e:
            self.db.session.rollback()
            self.connected = False
            logger.warning("Could not connect to the database. Running in memory-only mode.")
            logger.error("Database connection error: %s", e)
        return self.connected

    # --- Users ----------------------------------------------------------

    @_translate_errors
    def find_user(self, phone):
        return User.query.filter_by(phone=phone).first()

    @_translate_errors
    def add_user(self, user):
        self.db.session.add(user)
        self.db.session.commit()
        return user

    # --- Price history --------------------------------------------------

    @_translate_errors
    def add_price(self, observation):
        self.db.session.add(observation)
        self.db.session.commit()
        return observation

    @_translate_errors
    def price_history(self, product_id):
        return (
            ProductPriceHistory.query
            .filter_by(product_id=product_id)
            .order_by(ProductPriceHistory.timestamp.desc(), ProductPriceHistory.id.desc())
            .all()
        )

    # --- Wishlist -------------------------------------------------------

    @_translate_errors
    def find_wishlist_item(self, phone, merchant_id, product_id):
        return WishlistItem.query.filter_by(
            phone=phone,
            merchant_id=merchant_id,
            product_id=product_id,
        ).first()

    @_translate_errors
    def add_wishlist_item(self, item):
        self.db.session.add(item)
        try:
            self.db.session.commit()
        except IntegrityError:
            # A concurrent request won the race past the duplicate check
            self.db.session.rollback()
            raise DuplicateError()
        return item

    @_translate_errors
    def wishlist_items(self, phone, merchant_id=None):
        query = WishlistItem.query.filter_by(phone=phone)
        if merchant_id is not None:
            query = query.filter_by(merchant_id=merchant_id)
        return query.order_by(WishlistItem.added_at.desc(), WishlistItem.pk.desc()).all()

    @_translate_errors
    def get_wishlist_item(self, item_id):
        return WishlistItem.query.filter_by(id=item_id).first()

    @_translate_errors
    def delete_wishlist_item(self, item):
        self.db.session.delete(item)
        self.db.session.commit()

    @_translate_errors
    def interested_phones(self, product_id):
        rows = (
            self.db.session.query(WishlistItem.phone)
            .filter(WishlistItem.product_id == product_id)
            .distinct()
            .all()
        )
        return {row.phone for row in rows}
