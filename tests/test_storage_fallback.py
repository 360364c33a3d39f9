import unittest
from unittest.mock import Mock, patch
from flask_jwt_extended import decode_token
from wishlist_service.errors import AuthorizationError, DuplicateError, NotFoundError, StorageUnavailableError
from wishlist_service.extensions import db
from wishlist_service.models import User, WishlistItem, new_id, utcnow
from wishlist_service.storage import StorageFallback
from tests.helpers import AppTestCase, SQLITE_MEMORY_URI


class TestStorageFallback(unittest.TestCase):

    def setUp(self):
        self.durable = Mock(name='durable')
        self.durable.name = 'database'
        self.ephemeral = Mock(name='ephemeral')
        self.ephemeral.name = 'memory'
        self.fallback = StorageFallback(self.durable, self.ephemeral)

    def test_uses_durable_store_when_available(self):
        self.durable.is_available.return_value = True

        result = self.fallback.run('op', lambda store: store.name)

        self.assertEqual(result, 'database')
        self.assertEqual(self.fallback.mode, 'database')

    def test_skips_durable_store_when_unavailable(self):
        self.durable.is_available.return_value = False
        action = Mock(return_value='ok')

        self.fallback.run('op', action)

        action.assert_called_once_with(self.ephemeral)
        self.assertEqual(self.fallback.mode, 'memory')

    def test_falls_back_when_durable_call_fails(self):
        self.durable.is_available.return_value = True

        def action(store):
            if store is self.durable:
                raise StorageUnavailableError('connection reset')
            return 'from memory'

        with self.assertLogs('wishlist_service.storage.fallback', level='WARNING') as logs:
            result = self.fallback.run('op', action)

        self.assertEqual(result, 'from memory')
        self.assertIn('connection reset', logs.output[0])

    def test_domain_errors_propagate(self):
        self.durable.is_available.return_value = True
        action = Mock(side_effect=DuplicateError())

        with self.assertRaises(DuplicateError):
            self.fallback.run('op', action)

        action.assert_called_once_with(self.durable)

    def test_named_errors_fall_through(self):
        self.durable.is_available.return_value = True
        action = Mock(side_effect=[NotFoundError(), 'removed'])

        result = self.fallback.run('op', action, fall_through_on=(NotFoundError,))

        self.assertEqual(result, 'removed')
        self.assertEqual(action.call_count, 2)


class TestDatabaseFailureFallback(AppTestCase):
    DATABASE_URI = SQLITE_MEMORY_URI

    def test_database_in_use(self):
        self.assertTrue(self.storage.durable.is_available())
        self.assertEqual(self.client.get('/health').get_json()['storage'], 'database')

    def test_record_falls_back_when_tables_missing(self):
        db.drop_all()
        ledger = self.services.price_ledger

        ledger.record('P1', '10')
        comparison = ledger.compare_by_history('P1')

        self.assertEqual(len(self.storage.ephemeral.price_observations), 1)
        self.assertEqual(comparison.current_price, 10)

    def test_wishlist_add_falls_back_on_write_failure(self):
        with patch.object(self.storage.durable, 'add_wishlist_item',
                          side_effect=StorageUnavailableError('disk full')):
            item = self.services.wishlist.add('1234567890', 'M1', 'P1')

        self.assertEqual(self.storage.ephemeral.wishlist, [item])

    def test_stores_diverge_silently(self):
        with patch.object(self.storage.durable, 'add_wishlist_item',
                          side_effect=StorageUnavailableError('disk full')):
            self.services.wishlist.add('1234567890', 'M1', 'P1')

        # Back online: the entry written during the outage is not visible
        self.assertEqual(self.services.wishlist.list_all('1234567890'), [])

    def test_unique_constraint_reports_duplicate(self):
        self.services.wishlist.add('1234567890', 'M1', 'P1')

        with patch.object(self.storage.durable, 'find_wishlist_item', return_value=None):
            with self.assertRaises(DuplicateError):
                self.services.wishlist.add('1234567890', 'M1', 'P1')

        self.assertEqual(self.storage.ephemeral.wishlist, [])

    def test_remove_finds_item_kept_in_memory(self):
        item = WishlistItem(id=new_id(), phone='1234567890', merchant_id='M1',
                            product_id='P1', added_at=utcnow())
        self.storage.ephemeral.add_wishlist_item(item)

        self.services.wishlist.remove('1234567890', item.id)

        self.assertEqual(self.storage.ephemeral.wishlist, [])

    def test_remove_missing_everywhere(self):
        with self.assertRaises(NotFoundError):
            self.services.wishlist.remove('1234567890', new_id())

    def test_remove_other_users_item_kept_in_memory(self):
        item = self._memory_item('1234567890', 'M1', 'P1')

        with self.assertRaises(AuthorizationError):
            self.services.wishlist.remove('9876543210', item.id)

        self.assertEqual(self.storage.ephemeral.wishlist, [item])

    def test_listing_falls_back_on_read_failure(self):
        first = self._memory_item('1234567890', 'M1', 'P1')
        second = self._memory_item('1234567890', 'M2', 'P2')

        with patch.object(self.storage.durable, 'wishlist_items',
                          side_effect=StorageUnavailableError('connection reset')):
            self.assertEqual(self.services.wishlist.list_all('1234567890'), [second, first])
            self.assertEqual(self.services.wishlist.list_by_merchant('1234567890', 'M1'), [first])

    def test_interested_count_falls_back_on_read_failure(self):
        self._memory_item('1234567890', 'M1', 'P1')
        self._memory_item('9876543210', 'M1', 'P1')

        with patch.object(self.storage.durable, 'interested_phones',
                          side_effect=StorageUnavailableError('connection reset')):
            self.assertEqual(self.services.wishlist.count_interested('P1'), 2)

    def test_user_lookup_falls_back_on_read_failure(self):
        user = self.storage.ephemeral.add_user(User(id=new_id(), phone='1234567890', created_at=utcnow()))

        with patch.object(self.storage.durable, 'find_user',
                          side_effect=StorageUnavailableError('connection reset')):
            self.assertIs(self.services.identity.find_user('1234567890'), user)

    def test_token_binds_user_created_during_outage(self):
        with patch.object(self.storage.durable, 'add_user',
                          side_effect=StorageUnavailableError('disk full')):
            user = self.services.identity.ensure_user('1234567890')

        self.assertEqual(self.storage.ephemeral.users, [user])

        # Database is back but has no record of the user
        claims = decode_token(self.services.sessions.issue('1234567890', '1212'))

        self.assertEqual(claims['user'], {'id': user.id, 'phone': '1234567890'})

    def _memory_item(self, phone, merchant_id, product_id):
        item = WishlistItem(id=new_id(), phone=phone, merchant_id=merchant_id,
                            product_id=product_id, added_at=utcnow())
        return self.storage.ephemeral.add_wishlist_item(item)


class TestUnreachableDatabase(AppTestCase):
    DATABASE_URI = 'sqlite:////nonexistent-directory/wishlist.db'

    def tearDown(self):
        self.ctx.pop()

    def test_runs_in_memory_only_mode(self):
        self.assertFalse(self.storage.durable.is_available())
        self.services.price_ledger.record('P1', '3')
        self.assertEqual(len(self.storage.ephemeral.price_observations), 1)


if __name__ == '__main__':
    unittest.main()
