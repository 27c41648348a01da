from types import SimpleNamespace
from unittest.mock import MagicMock

from django.db import DatabaseError
from django.test import SimpleTestCase, override_settings
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated

from core.cache import CacheService
from core.exceptions import ClassFull, PersistenceError
from core.permissions import IsAdmin, IsTrainer
from core.responses import ErrorResponse
from core.services import Event, EventBus
from core.views import fitbook_exception_handler


class TestErrorEnvelope(SimpleTestCase):

    def test_conflict_message_is_exposed(self):
        response = ErrorResponse.from_exception(ClassFull())
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data, {'success': False, 'message': 'Class is already full'})

    def test_server_errors_are_reduced_to_generic_message(self):
        response = ErrorResponse.from_exception(PersistenceError("deadlock detected on booking_booking"))
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['message'], 'Server error')

    def test_handler_wraps_drf_exceptions(self):
        response = fitbook_exception_handler(NotAuthenticated(), {'view': None})
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data['success'])
        self.assertIn('credentials', response.data['message'])

    def test_handler_wraps_service_exceptions(self):
        response = fitbook_exception_handler(ClassFull(), {'view': None})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['message'], 'Class is already full')

    def test_handler_hides_storage_errors(self):
        response = fitbook_exception_handler(DatabaseError("disk full"), {'view': None})
        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['message'], 'Server error')
        self.assertNotIn('disk full', str(response.data))


class TestRolePermissions(SimpleTestCase):

    def _request(self, role):
        return SimpleNamespace(user=SimpleNamespace(is_authenticated=True, role=role, id='u1'))

    def test_trainer_permission(self):
        self.assertTrue(IsTrainer().has_permission(self._request('trainer'), None))
        self.assertTrue(IsTrainer().has_permission(self._request('admin'), None))
        self.assertFalse(IsTrainer().has_permission(self._request('user'), None))

    def test_trainer_owns_object(self):
        obj = SimpleNamespace(trainer='someone', trainer_id='u1')
        self.assertTrue(IsTrainer().has_object_permission(self._request('trainer'), None, obj))
        obj.trainer_id = 'u2'
        self.assertFalse(IsTrainer().has_object_permission(self._request('trainer'), None, obj))
        self.assertTrue(IsTrainer().has_object_permission(self._request('admin'), None, obj))

    def test_admin_permission(self):
        self.assertTrue(IsAdmin().has_permission(self._request('admin'), None))
        self.assertFalse(IsAdmin().has_permission(self._request('trainer'), None))


@override_settings(REDIS_URL='')
class TestLocalEventBus(SimpleTestCase):

    def test_local_subscribers_receive_each_event_once(self):
        handler = MagicMock()
        EventBus.subscribe('test.event', handler)
        self.addCleanup(EventBus.unsubscribe, 'test.event', handler)

        event = Event('test.event', {'value': 1}, source_module='tests')
        EventBus.publish(event)
        EventBus.publish(event)

        handler.assert_called_once_with(event)

    def test_failing_handler_does_not_break_publisher(self):
        handler = MagicMock(side_effect=RuntimeError("boom"))
        EventBus.subscribe('test.failing', handler)
        self.addCleanup(EventBus.unsubscribe, 'test.failing', handler)

        EventBus.publish(Event('test.failing', {}, source_module='tests'))
        handler.assert_called_once()


class TestCacheKeys(SimpleTestCase):

    def test_generate_key(self):
        self.assertEqual(CacheService.generate_key('fitnessclass', 'list', page='1'), 'fitnessclass:["list", ["page", "1"]]')

    def test_long_keys_are_hashed(self):
        key = CacheService.generate_key('fitnessclass', 'x' * 200)
        self.assertTrue(key.startswith('fitnessclass:'))
        self.assertEqual(len(key), len('fitnessclass:') + 32)
