"""
Assembles the buses, grid factories and form services the views receive.

Views get their collaborators as as_view() keyword arguments; this module
is the only place that knows which concrete handler serves which message.
"""
from dataclasses import dataclass
from functools import lru_cache
from django.core.exceptions import ImproperlyConfigured
from apps.order_states.commands import (
    AddOrderReturnStateCommand,
    AddOrderStateCommand,
    EditOrderReturnStateCommand,
    EditOrderStateCommand,
    GetOrderReturnStateForEditing,
    GetOrderStateForEditing,
)
from apps.order_states.forms import (
    FormBuilder,
    FormHandler,
    OrderReturnStateForm,
    OrderStateForm,
)
from apps.order_states.grids import (
    GridFactory,
    OrderReturnStateGridDataFactory,
    OrderReturnStatesGridDefinitionFactory,
    OrderStateGridDataFactory,
    OrderStatesGridDefinitionFactory,
)
from apps.order_states.services.bus import CommandBus, QueryBus
from apps.order_states.services.handlers import (
    AddOrderReturnStateHandler,
    AddOrderStateHandler,
    EditOrderReturnStateHandler,
    EditOrderStateHandler,
    GetOrderReturnStateForEditingHandler,
    GetOrderStateForEditingHandler,
)
from apps.order_states.services.toggle import OrderStateToggler


def build_query_bus() -> QueryBus:
    bus = QueryBus()
    bus.register(GetOrderStateForEditing, GetOrderStateForEditingHandler())
    bus.register(GetOrderReturnStateForEditing, GetOrderReturnStateForEditingHandler())
    return bus


def build_command_bus() -> CommandBus:
    bus = CommandBus()
    bus.register(AddOrderStateCommand, AddOrderStateHandler())
    bus.register(EditOrderStateCommand, EditOrderStateHandler())
    bus.register(AddOrderReturnStateCommand, AddOrderReturnStateHandler())
    bus.register(EditOrderReturnStateCommand, EditOrderReturnStateHandler())
    return bus


# Messages the views and services dispatch
QUERIES = (GetOrderStateForEditing, GetOrderReturnStateForEditing)
COMMANDS = (
    AddOrderStateCommand,
    EditOrderStateCommand,
    AddOrderReturnStateCommand,
    EditOrderReturnStateCommand,
)


def check_buses(query_bus, command_bus):
    """Fail at startup when a dispatched message has no handler."""
    missing = [
        f"{bus.name}:{message_type.__name__}"
        for bus, message_types in ((query_bus, QUERIES), (command_bus, COMMANDS))
        for message_type in message_types
        if not bus.has_handler(message_type)
    ]
    if missing:
        raise ImproperlyConfigured(f"No handler registered for: {', '.join(missing)}")


@dataclass(frozen=True)
class OrderStateServices:
    query_bus: QueryBus
    command_bus: CommandBus
    order_states_grid_factory: GridFactory
    order_return_states_grid_factory: GridFactory
    order_state_form_builder: FormBuilder
    order_return_state_form_builder: FormBuilder
    form_handler: FormHandler
    toggler: OrderStateToggler


def build_services(query_bus=None, command_bus=None) -> OrderStateServices:
    query_bus = query_bus or build_query_bus()
    command_bus = command_bus or build_command_bus()
    check_buses(query_bus, command_bus)

    return OrderStateServices(
        query_bus=query_bus,
        command_bus=command_bus,
        order_states_grid_factory=GridFactory(
            OrderStatesGridDefinitionFactory(), OrderStateGridDataFactory()
        ),
        order_return_states_grid_factory=GridFactory(
            OrderReturnStatesGridDefinitionFactory(), OrderReturnStateGridDataFactory()
        ),
        order_state_form_builder=FormBuilder(OrderStateForm, query_bus, GetOrderStateForEditing),
        order_return_state_form_builder=FormBuilder(
            OrderReturnStateForm, query_bus, GetOrderReturnStateForEditing
        ),
        form_handler=FormHandler(command_bus),
        toggler=OrderStateToggler(query_bus, command_bus),
    )


@lru_cache(maxsize=None)
def get_services() -> OrderStateServices:
    """Services shared by the page and API URL confs."""
    return build_services()
