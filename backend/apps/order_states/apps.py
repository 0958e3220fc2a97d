"""
Order statuses app configuration.
Back office for order statuses and order return statuses.
"""
from django.apps import AppConfig


class OrderStatesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.order_states'
    verbose_name = 'Order Statuses'
