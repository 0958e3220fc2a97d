"""
Commands, queries and query results exchanged over the buses.

Commands and queries are plain immutable declarations: no database access,
no validation. Handlers in services/handlers.py give them meaning.
"""
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

# Options of an order state, in the order the form displays them
ORDER_STATE_FLAGS = (
    'logable',
    'invoice',
    'hidden',
    'send_email',
    'pdf_invoice',
    'pdf_delivery',
    'shipped',
    'paid',
    'delivery',
)


# ============================
# Queries
# ============================

@dataclass(frozen=True)
class GetOrderStateForEditing:
    order_state_id: int
    # Lock the row until the surrounding transaction ends
    for_update: bool = False


@dataclass(frozen=True)
class GetOrderReturnStateForEditing:
    order_return_state_id: int


@dataclass(frozen=True)
class EditableOrderState:
    order_state_id: int
    names: Dict[str, str]
    templates: Dict[str, str]
    color: str
    logable: bool = False
    invoice: bool = False
    hidden: bool = False
    send_email: bool = False
    pdf_invoice: bool = False
    pdf_delivery: bool = False
    shipped: bool = False
    paid: bool = False
    delivery: bool = False


@dataclass(frozen=True)
class EditableOrderReturnState:
    order_return_state_id: int
    names: Dict[str, str]
    color: str


# ============================
# Commands
# ============================

@dataclass(frozen=True)
class AddOrderStateCommand:
    names: Dict[str, str]
    color: str
    templates: Dict[str, str] = field(default_factory=dict)
    logable: bool = False
    invoice: bool = False
    hidden: bool = False
    send_email: bool = False
    pdf_invoice: bool = False
    pdf_delivery: bool = False
    shipped: bool = False
    paid: bool = False
    delivery: bool = False


@dataclass(frozen=True)
class EditOrderStateCommand:
    """
    Partial update of an order state.

    Fields left to None are not changed, so a command carrying a single
    value only touches that value.
    """
    order_state_id: int
    names: Optional[Dict[str, str]] = None
    templates: Optional[Dict[str, str]] = None
    color: Optional[str] = None
    logable: Optional[bool] = None
    invoice: Optional[bool] = None
    hidden: Optional[bool] = None
    send_email: Optional[bool] = None
    pdf_invoice: Optional[bool] = None
    pdf_delivery: Optional[bool] = None
    shipped: Optional[bool] = None
    paid: Optional[bool] = None
    delivery: Optional[bool] = None

    def changed_fields(self) -> Dict[str, Any]:
        return _changed_fields(self, 'order_state_id')


@dataclass(frozen=True)
class AddOrderReturnStateCommand:
    names: Dict[str, str]
    color: str


@dataclass(frozen=True)
class EditOrderReturnStateCommand:
    order_return_state_id: int
    names: Optional[Dict[str, str]] = None
    color: Optional[str] = None

    def changed_fields(self) -> Dict[str, Any]:
        return _changed_fields(self, 'order_return_state_id')


def _changed_fields(command, id_field: str) -> Dict[str, Any]:
    return {
        f.name: getattr(command, f.name)
        for f in fields(command)
        if f.name != id_field and getattr(command, f.name) is not None
    }
