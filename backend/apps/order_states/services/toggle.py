"""
Flip a single boolean option of an order state.
"""
import logging
from django.db import transaction
from apps.order_states.commands import EditOrderStateCommand, GetOrderStateForEditing

logger = logging.getLogger(__name__)


class OrderStateToggler:
    """
    Read-then-write toggle over the query and command buses.

    Both round trips share one transaction and the read locks the row:
    concurrent toggles of the same order state are applied one after the
    other.
    """

    TOGGLEABLE_FIELDS = ('delivery', 'invoice', 'send_email')

    def __init__(self, query_bus, command_bus):
        self.query_bus = query_bus
        self.command_bus = command_bus

    def toggle(self, order_state_id: int, attribute: str) -> bool:
        """
        Negate `attribute` on the order state and return its new value.

        Raises:
            ValueError: attribute is not a toggleable option
            OrderStateException: the order state cannot be read or edited
        """
        if attribute not in self.TOGGLEABLE_FIELDS:
            raise ValueError(f"'{attribute}' is not a toggleable order state option")

        with transaction.atomic():
            editable = self.query_bus.handle(
                GetOrderStateForEditing(order_state_id, for_update=True)
            )
            new_value = not getattr(editable, attribute)
            self.command_bus.handle(
                EditOrderStateCommand(order_state_id=order_state_id, **{attribute: new_value})
            )

        logger.info(f"Order state {order_state_id} {attribute} set to {new_value}")
        return new_value
