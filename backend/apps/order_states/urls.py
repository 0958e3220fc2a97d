"""
Order statuses back office URL patterns.
"""
from django.urls import path
from apps.order_states import views
from apps.order_states.wiring import get_services

app_name = 'order_states'

services = get_services()

grid_factories = {
    'order_states_grid_factory': services.order_states_grid_factory,
    'order_return_states_grid_factory': services.order_return_states_grid_factory,
}

order_state_form_services = {
    'form_builder': services.order_state_form_builder,
    'form_handler': services.form_handler,
    'query_bus': services.query_bus,
}

order_return_state_form_services = {
    'form_builder': services.order_return_state_form_builder,
    'form_handler': services.form_handler,
    'query_bus': services.query_bus,
}

urlpatterns = [
    # Listing
    path('', views.OrderStatesIndexView.as_view(**grid_factories), name='index'),
    path('search/', views.OrderStatesSearchGridView.as_view(**grid_factories), name='search'),

    # Order statuses
    path('new/', views.OrderStateCreateView.as_view(**order_state_form_services), name='create'),
    path(
        '<int:order_state_id>/edit/',
        views.OrderStateEditView.as_view(**order_state_form_services),
        name='edit'
    ),

    # Order return statuses
    path(
        'return-states/new/',
        views.OrderReturnStateCreateView.as_view(**order_return_state_form_services),
        name='return_state_create'
    ),
    path(
        'return-states/<int:order_return_state_id>/edit/',
        views.OrderReturnStateEditView.as_view(**order_return_state_form_services),
        name='return_state_edit'
    ),

    # Toggles
    path(
        '<int:order_state_id>/toggle-delivery/',
        views.OrderStateToggleView.as_view(toggler=services.toggler, attribute='delivery'),
        name='toggle_delivery'
    ),
    path(
        '<int:order_state_id>/toggle-invoice/',
        views.OrderStateToggleView.as_view(toggler=services.toggler, attribute='invoice'),
        name='toggle_invoice'
    ),
    path(
        '<int:order_state_id>/toggle-send-email/',
        views.OrderStateToggleView.as_view(toggler=services.toggler, attribute='send_email'),
        name='toggle_send_email'
    ),
]
