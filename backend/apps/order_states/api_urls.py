"""
Order statuses API URL patterns.
"""
from django.urls import path
from apps.order_states import api_views
from apps.order_states.wiring import get_services

app_name = 'order_states_api'

services = get_services()

urlpatterns = [
    path(
        'order-states/',
        api_views.OrderStateGridAPIView.as_view(grid_factory=services.order_states_grid_factory),
        name='order_state_grid'
    ),
    path(
        'order-states/<int:order_state_id>/',
        api_views.OrderStateDetailAPIView.as_view(query_bus=services.query_bus),
        name='order_state_detail'
    ),
    path(
        'order-return-states/',
        api_views.OrderReturnStateGridAPIView.as_view(grid_factory=services.order_return_states_grid_factory),
        name='order_return_state_grid'
    ),
    path(
        'order-return-states/<int:order_return_state_id>/',
        api_views.OrderReturnStateDetailAPIView.as_view(query_bus=services.query_bus),
        name='order_return_state_detail'
    ),
]
