"""
Tests for the order statuses back office pages.
"""
from django.contrib.messages import get_messages
from django.test import override_settings
from django.urls import reverse
from common.models import AdminActionLog
from apps.order_states.models import OrderReturnState, OrderState
from apps.order_states.tests.base import BaseOrderStatesTestCase, User


def flashed(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


class IndexViewTestCase(BaseOrderStatesTestCase):
    """Test the listing page."""

    def test_anonymous_is_sent_to_login(self):
        response = self.client.get(reverse('order_states:index'))
        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('admin:login'), response['Location'])

    def test_employee_without_permission_is_forbidden(self):
        nobody = User.objects.create_user(username='nobody', password='x', is_staff=True)
        self.login(nobody)

        response = self.client.get(reverse('order_states:index'))
        self.assertEqual(response.status_code, 403)

    def test_lists_both_grids(self):
        self.create_order_state(name='Shipped')
        self.create_order_return_state(name='Return denied')
        self.login(self.viewer)

        response = self.client.get(reverse('order_states:index'))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.context['order_states_grid']['data']['records_total'], 1)
        self.assertEqual(response.context['order_return_states_grid']['data']['records_total'], 1)
        self.assertContains(response, 'Shipped')
        self.assertContains(response, 'Return denied')

    @override_settings(ORDER_STATES_HELP_URL='https://help.example.com/order-statuses')
    def test_help_link(self):
        self.login(self.viewer)

        response = self.client.get(reverse('order_states:index'))

        self.assertEqual(response.context['help_link'], 'https://help.example.com/order-statuses')
        self.assertContains(response, 'href="https://help.example.com/order-statuses"')

    def test_filters_are_read_from_query_string(self):
        self.create_order_state(name='Shipped')
        self.create_order_state(name='Delivered')
        self.login()

        response = self.client.get(reverse('order_states:index'), {'order_states-filter_name': 'deliv'})

        records = response.context['order_states_grid']['data']['records']
        self.assertEqual([r['name'] for r in records], ['Delivered'])


class SearchGridViewTestCase(BaseOrderStatesTestCase):
    """Test grid search dispatch."""

    def setUp(self):
        super().setUp()
        self.login(self.viewer)

    def test_order_states_grid_by_default(self):
        response = self.client.post(reverse('order_states:search'), {
            'order_states-filter_name': 'Ship',
        })

        self.assertEqual(response.status_code, 302)
        self.assertIn('order_states-filter_name=Ship', response['Location'])

    def test_return_states_grid_when_key_is_present(self):
        response = self.client.post(reverse('order_states:search'), {
            'order_return_states': '1',
            'order_return_states-filter_name': 'denied',
            'order_states-filter_name': 'Ship',
        })

        self.assertEqual(response.status_code, 302)
        self.assertIn('order_return_states-filter_name=denied', response['Location'])
        self.assertNotIn('order_states-filter_name', response['Location'])

    def test_other_grid_parameters_are_kept(self):
        url = reverse('order_states:search') + '?order_states-filter_name=Ship'
        response = self.client.post(url, {
            'order_return_states': '1',
            'order_return_states-filter_name': 'denied',
        })

        self.assertIn('order_states-filter_name=Ship', response['Location'])
        self.assertIn('order_return_states-filter_name=denied', response['Location'])

    def test_get_is_not_allowed(self):
        response = self.client.get(reverse('order_states:search'))
        self.assertEqual(response.status_code, 405)


class OrderStateCreateViewTestCase(BaseOrderStatesTestCase):
    """Test the order state creation page."""

    def setUp(self):
        super().setUp()
        self.login()

    def test_form_is_displayed(self):
        response = self.client.get(reverse('order_states:create'))

        self.assertEqual(response.status_code, 200)
        self.assertIn('name_en', response.context['order_state_form'].fields)
        self.assertIn('template_fr', response.context['order_state_form'].fields)
        self.assertEqual(response.context['context_lang_id'], 'en')

    def test_valid_submission_redirects_to_listing(self):
        response = self.client.post(reverse('order_states:create'), {
            'name_en': 'Shipped',
            'color': '#8a2be2',
            'send_email': 'on',
        })

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        order_state = OrderState.objects.get()
        self.assertEqual(order_state.color, '#8A2BE2')
        self.assertTrue(order_state.send_email)
        self.assertIn('Successful creation.', flashed(response))

        log = AdminActionLog.objects.get()
        self.assertEqual(log.action, AdminActionLog.Action.CREATE_ORDER_STATE)
        self.assertEqual(log.target_id, str(order_state.pk))

    def test_duplicate_name_is_flashed_and_form_rendered(self):
        self.create_order_state(name='Shipped')

        response = self.client.post(reverse('order_states:create'), {
            'name_en': 'Shipped',
            'color': '#FFFFFF',
        })

        self.assertEqual(response.status_code, 200)
        self.assertIn('An order status with the same name already exists: Shipped', flashed(response))
        self.assertEqual(OrderState.objects.count(), 1)

    def test_missing_name_is_flashed(self):
        response = self.client.post(reverse('order_states:create'), {'color': '#FFFFFF'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('The name field is required.', flashed(response))

    def test_markup_in_name_is_flashed_as_invalid(self):
        response = self.client.post(reverse('order_states:create'), {
            'name_en': '<b>Shipped</b>',
            'color': '#FFFFFF',
        })

        self.assertEqual(response.status_code, 200)
        self.assertIn('The "Name" field is invalid.', flashed(response))
        self.assertEqual(response.context['order_state_form']['name_en'].value(), '<b>Shipped</b>')
        self.assertFalse(OrderState.objects.exists())

    @override_settings(ORDER_STATES_HELP_URL='https://help.example.com/order-statuses')
    def test_help_link(self):
        response = self.client.get(reverse('order_states:create'))
        self.assertEqual(response.context['help_link'], 'https://help.example.com/order-statuses')

    def test_viewer_cannot_create(self):
        self.login(self.viewer)
        response = self.client.post(reverse('order_states:create'), {'name_en': 'X', 'color': '#FFFFFF'})

        self.assertEqual(response.status_code, 403)
        self.assertFalse(OrderState.objects.exists())


class OrderStateEditViewTestCase(BaseOrderStatesTestCase):
    """Test the order state edition page."""

    def setUp(self):
        super().setUp()
        self.login()
        self.order_state = self.create_order_state(name='Shipped', shipped=True)
        self.url = reverse('order_states:edit', args=[self.order_state.pk])

    def test_form_is_prefilled(self):
        response = self.client.get(self.url)

        form = response.context['order_state_form']
        self.assertEqual(form.initial['name_en'], 'Shipped')
        self.assertTrue(form.initial['shipped'])
        self.assertEqual(response.context['editable_order_state'].order_state_id, self.order_state.pk)

    def test_invalid_submission_renders_errors_without_saving(self):
        response = self.client.post(self.url, {'name_en': 'Renamed', 'color': 'purple'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('color', response.context['order_state_form'].errors)
        self.order_state.refresh_from_db()
        self.assertEqual(self.order_state.get_name(), 'Shipped')
        self.assertEqual(self.order_state.color, '#8A2BE2')

    def test_valid_submission(self):
        response = self.client.post(self.url, {'name_en': 'Sent', 'color': '#000000', 'paid': 'on'})

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.order_state.refresh_from_db()
        self.assertEqual(self.order_state.get_name(), 'Sent')
        self.assertTrue(self.order_state.paid)
        self.assertFalse(self.order_state.shipped)
        self.assertIn('Successful update.', flashed(response))

    def test_duplicate_name_is_flashed_and_input_kept(self):
        self.create_order_state(name='Paid')

        response = self.client.post(self.url, {'name_en': 'paid', 'color': '#8A2BE2'})

        self.assertEqual(response.status_code, 200)
        self.assertIn('An order status with the same name already exists: paid', flashed(response))
        self.assertEqual(response.context['order_state_form']['name_en'].value(), 'paid')
        self.assertEqual(response.context['editable_order_state'].order_state_id, self.order_state.pk)
        self.order_state.refresh_from_db()
        self.assertEqual(self.order_state.get_name(), 'Shipped')

    @override_settings(ORDER_STATES_HELP_URL='https://help.example.com/order-statuses')
    def test_help_link(self):
        response = self.client.get(self.url)
        self.assertEqual(response.context['help_link'], 'https://help.example.com/order-statuses')

    def test_unknown_id_redirects_with_message(self):
        response = self.client.get(reverse('order_states:edit', args=[9999]))

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.assertIn('This order status does not exist.', flashed(response))


class OrderReturnStateViewsTestCase(BaseOrderStatesTestCase):
    """Test the order return state pages."""

    def setUp(self):
        super().setUp()
        self.login()

    def test_create(self):
        response = self.client.post(reverse('order_states:return_state_create'), {
            'name_en': 'Waiting for package',
            'color': '#8A2BE2',
        })

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.assertEqual(OrderReturnState.objects.get().get_name(), 'Waiting for package')

    def test_edit(self):
        order_return_state = self.create_order_return_state()
        url = reverse('order_states:return_state_edit', args=[order_return_state.pk])

        response = self.client.post(url, {'name_en': 'Received', 'color': '#32CD32'})

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        order_return_state.refresh_from_db()
        self.assertEqual(order_return_state.get_name(), 'Received')

    def test_edit_duplicate_name_is_flashed_and_input_kept(self):
        self.create_order_return_state(name='Return denied')
        order_return_state = self.create_order_return_state(name='Package received')
        url = reverse('order_states:return_state_edit', args=[order_return_state.pk])

        response = self.client.post(url, {'name_en': 'RETURN DENIED', 'color': '#32CD32'})

        self.assertEqual(response.status_code, 200)
        self.assertIn(
            'An order return status with the same name already exists: RETURN DENIED',
            flashed(response)
        )
        self.assertEqual(response.context['order_return_state_form']['name_en'].value(), 'RETURN DENIED')
        self.assertEqual(
            response.context['editable_order_return_state'].order_return_state_id,
            order_return_state.pk
        )
        order_return_state.refresh_from_db()
        self.assertEqual(order_return_state.get_name(), 'Package received')

    def test_edit_unknown_id(self):
        response = self.client.get(reverse('order_states:return_state_edit', args=[404]))

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.assertIn('This order return status does not exist.', flashed(response))


class ToggleViewTestCase(BaseOrderStatesTestCase):
    """Test the toggle actions."""

    def setUp(self):
        super().setUp()
        self.order_state = self.create_order_state(delivery=False)

    def test_toggle_delivery(self):
        self.login()
        response = self.client.post(reverse('order_states:toggle_delivery', args=[self.order_state.pk]))

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.order_state.refresh_from_db()
        self.assertTrue(self.order_state.delivery)
        self.assertIn('The status has been successfully updated.', flashed(response))

        log = AdminActionLog.objects.get()
        self.assertEqual(log.action, AdminActionLog.Action.TOGGLE_ORDER_STATE)
        self.assertEqual(log.details, {'field': 'delivery', 'value': True})

    def test_toggle_invoice_and_send_email(self):
        self.login()
        self.client.post(reverse('order_states:toggle_invoice', args=[self.order_state.pk]))
        self.client.post(reverse('order_states:toggle_send_email', args=[self.order_state.pk]))

        self.order_state.refresh_from_db()
        self.assertTrue(self.order_state.invoice)
        self.assertTrue(self.order_state.send_email)
        self.assertFalse(self.order_state.delivery)

    def test_unknown_id_redirects_with_message(self):
        self.login()
        response = self.client.post(reverse('order_states:toggle_delivery', args=[9999]))

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.assertIn('This order status does not exist.', flashed(response))
        self.assertFalse(AdminActionLog.objects.exists())

    def test_missing_permission_redirects_with_message(self):
        self.login(self.viewer)
        response = self.client.post(reverse('order_states:toggle_delivery', args=[self.order_state.pk]))

        self.assertRedirects(response, reverse('order_states:index'), fetch_redirect_response=False)
        self.assertIn('You do not have permission to edit this.', flashed(response))
        self.order_state.refresh_from_db()
        self.assertFalse(self.order_state.delivery)

    def test_get_is_not_allowed(self):
        self.login()
        response = self.client.get(reverse('order_states:toggle_delivery', args=[self.order_state.pk]))
        self.assertEqual(response.status_code, 405)
