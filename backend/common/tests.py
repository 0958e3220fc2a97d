"""
Tests for shared validators, logging service and middleware.
"""
from django.contrib.auth import get_user_model
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import ValidationError
from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase, TestCase
from common.middleware import BackOfficeLoggingMiddleware
from common.models import AdminActionLog, Language
from common.services.logging_service import LoggingService
from common.validators import is_generic_name, is_hex_color, validate_hex_color

User = get_user_model()


class ValidatorsTestCase(SimpleTestCase):
    """Test color and name validators."""

    def test_hex_color(self):
        self.assertTrue(is_hex_color('#32CD32'))
        self.assertTrue(is_hex_color('#32cd32'))
        self.assertFalse(is_hex_color('32CD32'))
        self.assertFalse(is_hex_color('#32CD3'))
        self.assertFalse(is_hex_color(None))

    def test_validate_hex_color(self):
        validate_hex_color('#32cd32')
        validate_hex_color('#32CD32')

        for value in ('green', ' #32CD32', '#32CD32FF', None):
            with self.assertRaises(ValidationError):
                validate_hex_color(value)

    def test_generic_name(self):
        self.assertTrue(is_generic_name('Awaiting Cash On Delivery validation'))
        self.assertTrue(is_generic_name('On backorder (paid)'))
        for name in ('<script>', 'a=b', '{{ name }}'):
            self.assertFalse(is_generic_name(name))


class LanguageQuerySetTestCase(TestCase):

    def test_default_language(self):
        Language.objects.create(iso_code='fr', name='Français')
        english = Language.objects.create(iso_code='en', name='English', is_default=True)

        self.assertEqual(Language.objects.default(), english)

    def test_falls_back_to_first_active_language(self):
        Language.objects.create(iso_code='de', name='Deutsch', is_active=False, is_default=True)
        french = Language.objects.create(iso_code='fr', name='Français')

        self.assertEqual(Language.objects.default(), french)

    def test_no_language(self):
        self.assertIsNone(Language.objects.default())


class LoggingServiceTestCase(TestCase):
    """Test admin action logging."""

    def setUp(self):
        self.factory = RequestFactory()
        self.admin_user = User.objects.create_user(username='admin', password='x', is_staff=True)

    def test_log_admin_action(self):
        request = self.factory.post('/admin/order-states/new/', HTTP_X_FORWARDED_FOR='203.0.113.7, 10.0.0.1',
                                    HTTP_USER_AGENT='Mozilla/5.0 (X11; Linux x86_64)')

        log = LoggingService.log_admin_action(
            self.admin_user,
            AdminActionLog.Action.CREATE_ORDER_STATE,
            request,
            target_model='OrderState',
            target_id=5,
        )

        self.assertEqual(log.admin_user, self.admin_user)
        self.assertEqual(log.target_id, '5')
        self.assertEqual(log.ip_address, '203.0.113.7')
        self.assertEqual(log.details, {})
        self.assertEqual(log.user_agent, 'Mozilla/5.0 (X11; Linux x86_64)')

    def test_anonymous_user_is_not_stored(self):
        request = self.factory.post('/admin/order-states/1/toggle-delivery/')

        log = LoggingService.log_admin_action(
            AnonymousUser(), AdminActionLog.Action.TOGGLE_ORDER_STATE, request,
            details={'field': 'delivery', 'value': True},
        )

        self.assertIsNone(log.admin_user)
        self.assertEqual(log.ip_address, '127.0.0.1')
        self.assertEqual(log.user_agent, '')

    def test_permission_denied_is_logged(self):
        request = self.factory.post('/admin/order-states/1/toggle-delivery/')

        with self.assertLogs('security', level='WARNING') as logs:
            LoggingService.log_permission_denied(self.admin_user, ('order_states.change_orderstate',), request)

        self.assertIn('PERMISSION DENIED', logs.output[0])


class BackOfficeLoggingMiddlewareTestCase(SimpleTestCase):
    """Test request logging of back office mutations."""

    def setUp(self):
        self.factory = RequestFactory()
        self.middleware = BackOfficeLoggingMiddleware(lambda request: HttpResponse(status=302))

    def test_mutation_is_logged(self):
        request = self.factory.post('/admin/order-states/new/')
        request.user = AnonymousUser()

        with self.assertLogs('back_office', level='INFO') as logs:
            self.middleware(request)

        self.assertIn('POST /admin/order-states/new/ by anonymous', logs.output[0])

    def test_reads_are_not_logged(self):
        request = self.factory.get('/admin/order-states/')

        with self.assertNoLogs('back_office'):
            self.middleware(request)

    def test_other_paths_are_not_logged(self):
        request = self.factory.post('/api/auth/token/')

        with self.assertNoLogs('back_office'):
            self.middleware(request)
