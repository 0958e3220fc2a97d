"""
Base test classes and fixtures for order status tests.
"""
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Permission
from django.test import TestCase
from common.models import Language
from apps.order_states.commands import AddOrderReturnStateCommand, AddOrderStateCommand
from apps.order_states.models import OrderReturnState, OrderState
from apps.order_states.wiring import build_command_bus

User = get_user_model()


class BaseOrderStatesTestCase(TestCase):
    """Base test case with languages, employees and status factories."""

    def setUp(self):
        """Set up test fixtures."""
        self.english = Language.objects.create(
            iso_code='en', name='English', is_active=True, is_default=True
        )
        self.french = Language.objects.create(
            iso_code='fr', name='Français', is_active=True
        )

        # Employee holding every order status permission
        self.admin_user = User.objects.create_user(
            username='admin',
            password='AdminPass123!',
            is_staff=True,
            is_superuser=True
        )

        # Employee allowed to look but not to touch
        self.viewer = User.objects.create_user(
            username='viewer',
            password='ViewerPass123!',
            is_staff=True
        )
        self.grant(self.viewer, 'view_orderstate')

        self.command_bus = build_command_bus()

    def grant(self, user, *codenames):
        user.user_permissions.add(
            *Permission.objects.filter(content_type__app_label='order_states', codename__in=codenames)
        )

    def login(self, user=None):
        self.client.force_login(user or self.admin_user)

    def create_order_state(self, name='Shipped', color='#8A2BE2', **flags):
        """Create an order state through the command bus."""
        order_state_id = self.command_bus.handle(AddOrderStateCommand(
            names={'en': name},
            color=color,
            templates={'en': flags.pop('template', '')},
            **flags
        ))
        return OrderState.objects.get(pk=order_state_id)

    def create_order_return_state(self, name='Package received', color='#32CD32'):
        """Create an order return state through the command bus."""
        order_return_state_id = self.command_bus.handle(AddOrderReturnStateCommand(
            names={'en': name},
            color=color,
        ))
        return OrderReturnState.objects.get(pk=order_return_state_id)


class RecordingBus:
    """
    Bus double: records dispatched messages and answers from a dict of
    message type -> result (or exception instance to raise).
    """

    def __init__(self, responses=None):
        self.messages = []
        self.responses = responses or {}

    def handle(self, message):
        self.messages.append(message)
        response = self.responses.get(type(message))
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(message)
        return response
