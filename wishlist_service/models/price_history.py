"""
Product Price History Model
Append-only: one row per observed price, never updated or deleted.
"""

from wishlist_service.extensions import db
from wishlist_service.models.base import isoformat_utc, utcnow


class ProductPriceHistory(db.Model):
    __tablename__ = 'product_price_history'
    __table_args__ = (
        db.CheckConstraint('price >= 0', name='ck_price_history_non_negative'),
        db.Index('ix_price_history_product_timestamp', 'product_id', 'timestamp'),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    product_id = db.Column(db.String(255), nullable=False, index=True)
    price = db.Column(db.Numeric(asdecimal=True), nullable=False)
    timestamp = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'price': float(self.price),
            'timestamp': isoformat_utc(self.timestamp),
        }
