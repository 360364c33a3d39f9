"""
Wishlist Item Model
A user cannot hold the same product from the same merchant twice.
"""

from wishlist_service.extensions import db
from wishlist_service.models.base import isoformat_utc, new_id, utcnow


class WishlistItem(db.Model):
    __tablename__ = 'wishlist_items'
    __table_args__ = (
        db.UniqueConstraint('phone', 'merchant_id', 'product_id', name='uq_wishlist_phone_merchant_product'),
    )

    # Surrogate key only orders rows inserted within the same instant
    pk = db.Column(db.Integer, primary_key=True, autoincrement=True)
    id = db.Column(db.String(36), unique=True, nullable=False, default=new_id)
    phone = db.Column(db.String(20), nullable=False, index=True)
    merchant_id = db.Column(db.String(255), nullable=False)
    product_id = db.Column(db.String(255), nullable=False, index=True)
    added_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id':         self.id,
            'phone':      self.phone,
            'merchantId': self.merchant_id,
            'productId':  self.product_id,
            'addedAt':    isoformat_utc(self.added_at),
        }
