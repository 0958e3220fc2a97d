"""
Domain exceptions raised by the order status handlers.

Every exception carries an ErrorKind. The set of kinds is closed: the
message tables in services/error_messages.py must cover all of them.
"""
import enum
from typing import Iterable


class ErrorKind(enum.Enum):
    NOT_FOUND = 'not_found'
    DUPLICATE_NAME = 'duplicate_name'
    CONSTRAINT_VIOLATION = 'constraint_violation'
    MISSING_REQUIRED_FIELDS = 'missing_required_fields'
    GENERIC = 'generic'


class ConstraintCode(enum.IntEnum):
    INVALID_NAME = 1
    INVALID_COLOR = 2
    INVALID_ID = 3


class BackOfficeDomainError(Exception):
    """Base class of every domain error the back office knows how to display."""
    kind = ErrorKind.GENERIC
    code = 0


# ============================
# Order states
# ============================

class OrderStateException(BackOfficeDomainError):
    """Base exception for order states."""


class OrderStateNotFoundException(OrderStateException):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, order_state_id):
        self.order_state_id = order_state_id
        super().__init__(f"Order state with id {order_state_id} was not found")


class DuplicateOrderStateNameException(OrderStateException):
    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"An order state named '{name}' already exists")


class OrderStateConstraintException(OrderStateException):
    kind = ErrorKind.CONSTRAINT_VIOLATION

    INVALID_NAME = ConstraintCode.INVALID_NAME
    INVALID_COLOR = ConstraintCode.INVALID_COLOR
    INVALID_ID = ConstraintCode.INVALID_ID

    def __init__(self, message: str, code: ConstraintCode):
        self.code = code
        super().__init__(message)


class MissingOrderStateRequiredFieldsException(OrderStateException):
    kind = ErrorKind.MISSING_REQUIRED_FIELDS

    def __init__(self, missing_required_fields: Iterable[str]):
        self.missing_required_fields = list(missing_required_fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.missing_required_fields)}"
        )


# ============================
# Order return states
# ============================

class OrderReturnStateException(BackOfficeDomainError):
    """Base exception for order return states."""


class OrderReturnStateNotFoundException(OrderReturnStateException):
    kind = ErrorKind.NOT_FOUND

    def __init__(self, order_return_state_id):
        self.order_return_state_id = order_return_state_id
        super().__init__(f"Order return state with id {order_return_state_id} was not found")


class DuplicateOrderReturnStateNameException(OrderReturnStateException):
    kind = ErrorKind.DUPLICATE_NAME

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"An order return state named '{name}' already exists")


class OrderReturnStateConstraintException(OrderReturnStateException):
    kind = ErrorKind.CONSTRAINT_VIOLATION

    INVALID_NAME = ConstraintCode.INVALID_NAME
    INVALID_COLOR = ConstraintCode.INVALID_COLOR
    INVALID_ID = ConstraintCode.INVALID_ID

    def __init__(self, message: str, code: ConstraintCode):
        self.code = code
        super().__init__(message)


class MissingOrderReturnStateRequiredFieldsException(OrderReturnStateException):
    kind = ErrorKind.MISSING_REQUIRED_FIELDS

    def __init__(self, missing_required_fields: Iterable[str]):
        self.missing_required_fields = list(missing_required_fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.missing_required_fields)}"
        )
