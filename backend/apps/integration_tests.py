"""
Integration tests for complete back office journeys.
Tests end-to-end flows from an empty shop to a configured status list.
"""
from io import StringIO
from django.contrib.messages import get_messages
from django.core.management import call_command
from django.test import TestCase
from django.urls import reverse
from django.contrib.auth import get_user_model
from rest_framework import status
from rest_framework.test import APIClient
from common.models import AdminActionLog, Language
from apps.order_states.models import OrderReturnState, OrderState

User = get_user_model()


class EmployeeJourneyTestCase(TestCase):
    """
    Test a complete employee journey.

    Journey:
    1. Install the standard statuses
    2. Browse the listing and search a grid
    3. Create a status
    4. Rename it
    5. Toggle its options
    6. Read it back through the API
    """

    def setUp(self):
        call_command('seed_order_states', stdout=StringIO())
        self.employee = User.objects.create_user(
            username='employee',
            password='EmployeePass123!',
            is_staff=True,
            is_superuser=True
        )
        self.client.force_login(self.employee)

    def test_complete_employee_journey(self):
        index_url = reverse('order_states:index')

        # Step 1: Standard statuses are listed
        response = self.client.get(index_url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.context['order_states_grid']['data']['records_total'],
            OrderState.objects.filter(deleted=False).count()
        )
        self.assertEqual(
            response.context['order_return_states_grid']['data']['records_total'],
            OrderReturnState.objects.count()
        )

        # Step 2: Search the return statuses grid
        response = self.client.post(reverse('order_states:search'), {
            'order_return_states': '1',
            'order_return_states-filter_name': 'package',
        })
        self.assertEqual(response.status_code, 302)
        response = self.client.get(response['Location'])
        names = [r['name'] for r in response.context['order_return_states_grid']['data']['records']]
        self.assertEqual(names, ['Waiting for package', 'Package received'])

        # Step 3: Create a status
        response = self.client.post(reverse('order_states:create'), {
            'name_en': 'Ready for pickup',
            'color': '#00CED1',
            'send_email': 'on',
            'template_en': 'pickup',
        })
        self.assertRedirects(response, index_url, fetch_redirect_response=False)
        order_state = OrderState.objects.get(translations__name='Ready for pickup')

        # Step 4: Rename it; an existing name is refused
        edit_url = reverse('order_states:edit', args=[order_state.pk])
        response = self.client.post(edit_url, {'name_en': 'Shipped', 'color': '#00CED1'})
        self.assertEqual(response.status_code, 200)
        self.assertIn(
            'An order status with the same name already exists: Shipped',
            [str(m) for m in get_messages(response.wsgi_request)]
        )

        response = self.client.post(edit_url, {
            'name_en': 'Ready for store pickup',
            'color': '#00CED1',
            'send_email': 'on',
        })
        self.assertRedirects(response, index_url, fetch_redirect_response=False)

        # Step 5: Toggle options from the listing
        self.client.post(reverse('order_states:toggle_delivery', args=[order_state.pk]))
        self.client.post(reverse('order_states:toggle_send_email', args=[order_state.pk]))

        order_state.refresh_from_db()
        self.assertTrue(order_state.delivery)
        self.assertFalse(order_state.send_email)
        self.assertEqual(order_state.get_name(), 'Ready for store pickup')

        # Every successful change left an audit entry
        actions = list(
            AdminActionLog.objects.filter(target_id=str(order_state.pk))
            .order_by('id').values_list('action', flat=True)
        )
        self.assertEqual(actions, [
            AdminActionLog.Action.CREATE_ORDER_STATE,
            AdminActionLog.Action.UPDATE_ORDER_STATE,
            AdminActionLog.Action.TOGGLE_ORDER_STATE,
            AdminActionLog.Action.TOGGLE_ORDER_STATE,
        ])

        # Step 6: Read it through the API
        api = APIClient()
        api.force_authenticate(user=self.employee)
        response = api.get(reverse('order_states_api:order_state_detail', args=[order_state.pk]))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['names']['en'], 'Ready for store pickup')
        self.assertTrue(response.data['delivery'])

    def test_default_language_is_installed_once(self):
        call_command('seed_order_states', stdout=StringIO())
        self.assertEqual(Language.objects.count(), 1)
