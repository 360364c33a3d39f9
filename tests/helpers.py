import unittest
from wishlist_service import create_app
from wishlist_service.extensions import db
from wishlist_service.services import get_services

TEST_JWT_SECRET = 'test-secret-key-long-enough-for-hs256-signing'
SQLITE_MEMORY_URI = 'sqlite://'


class AppTestCase(unittest.TestCase):
    """Fresh app per test; memory-only unless DATABASE_URI is set."""

    DATABASE_URI = None
    EXTRA_CONFIG = {}

    def setUp(self):
        config = {
            'TESTING': True,
            'SQLALCHEMY_DATABASE_URI': self.DATABASE_URI,
            'JWT_SECRET_KEY': TEST_JWT_SECRET,
            'OTP_FIXED_CODE': '1212',
            'SHOPIFY_WEBHOOK_SECRET': None,
            'LOG_LEVEL': 'WARNING',
        }
        config.update(self.EXTRA_CONFIG)
        self.app = create_app(config)
        self.ctx = self.app.app_context()
        self.ctx.push()
        self.client = self.app.test_client()
        self.services = get_services()
        self.storage = self.services.wishlist.storage

    def tearDown(self):
        if self.DATABASE_URI:
            db.session.remove()
            db.drop_all()
        self.ctx.pop()

    def token_for(self, phone):
        return self.services.sessions.issue(phone, '1212')

    def auth_headers(self, phone):
        return {'Authorization': f'Bearer {self.token_for(phone)}'}
