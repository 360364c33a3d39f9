from wishlist_service.extensions import db
from wishlist_service.models.base import isoformat_utc, new_id, utcnow


class User(db.Model):
    __tablename__ = 'users'

    id = db.Column(db.String(36), primary_key=True, default=new_id)
    phone = db.Column(db.String(20), unique=True, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'phone': self.phone,
            'createdAt': isoformat_utc(self.created_at),
        }
