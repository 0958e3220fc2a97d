"""
Tests for the read-only order statuses API.
"""
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient
from apps.order_states.tests.base import BaseOrderStatesTestCase, User


class OrderStatesAPITestCase(BaseOrderStatesTestCase):
    """Test order statuses API endpoints."""

    def setUp(self):
        super().setUp()
        self.client = APIClient()
        self.order_state = self.create_order_state(name='Shipped', delivery=True)
        self.order_return_state = self.create_order_return_state(name='Return denied')

    def test_requires_authentication(self):
        response = self.client.get(reverse('order_states_api:order_state_grid'))
        self.assertIn(response.status_code, [status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN])

    def test_requires_view_permission(self):
        nobody = User.objects.create_user(username='nobody', password='x', is_staff=True)
        self.client.force_authenticate(user=nobody)

        response = self.client.get(reverse('order_states_api:order_state_grid'))
        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_order_state_grid(self):
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(reverse('order_states_api:order_state_grid'), {
            'order_states-filter_delivery': '1',
        })

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['records_total'], 1)
        record = response.data['data']['records'][0]
        self.assertEqual(record['name'], 'Shipped')
        self.assertTrue(record['delivery'])

    def test_order_return_state_grid(self):
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(reverse('order_states_api:order_return_state_grid'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['records'][0]['name'], 'Return denied')

    def test_order_state_detail(self):
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(
            reverse('order_states_api:order_state_detail', args=[self.order_state.pk])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['names'], {'en': 'Shipped', 'fr': 'Shipped'})
        self.assertTrue(response.data['delivery'])

    def test_order_state_detail_not_found(self):
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(reverse('order_states_api:order_state_detail', args=[9999]))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'This order status does not exist.')

    def test_order_return_state_detail(self):
        self.client.force_authenticate(user=self.viewer)

        response = self.client.get(
            reverse('order_states_api:order_return_state_detail', args=[self.order_return_state.pk])
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['color'], '#32CD32')
