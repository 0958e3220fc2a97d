"""
Translate domain exceptions into messages shown to employees.

One table per entity kind, each keyed by ErrorKind. The tables are checked
at import time so a new ErrorKind cannot ship without a message.
"""
from django.core.exceptions import ImproperlyConfigured
from django.utils.translation import gettext as _
from apps.order_states.exceptions import (
    BackOfficeDomainError,
    ConstraintCode,
    ErrorKind,
    OrderReturnStateException,
)


def _generic_message(exc) -> str:
    return _('An unexpected error occurred. [%(type)s code %(code)s]') % {
        'type': type(exc).__name__,
        'code': int(exc.code),
    }


def _invalid_field(label):
    return lambda exc: _('The %s field is invalid.') % f'"{_(label)}"'


CONSTRAINT_MESSAGES = {
    ConstraintCode.INVALID_NAME: _invalid_field('Name'),
    ConstraintCode.INVALID_COLOR: _invalid_field('Color'),
}


def _constraint_message(exc) -> str:
    message = CONSTRAINT_MESSAGES.get(exc.code)
    if message is None:
        return _generic_message(exc)
    return message(exc)


def _missing_fields_message(exc) -> str:
    return _('The %s field is required.') % ','.join(exc.missing_required_fields)


ORDER_STATE_MESSAGES = {
    ErrorKind.NOT_FOUND: lambda exc: _('This order status does not exist.'),
    ErrorKind.DUPLICATE_NAME: lambda exc: (
        _('An order status with the same name already exists: %s') % exc.name
    ),
    ErrorKind.CONSTRAINT_VIOLATION: _constraint_message,
    ErrorKind.MISSING_REQUIRED_FIELDS: _missing_fields_message,
    ErrorKind.GENERIC: _generic_message,
}

ORDER_RETURN_STATE_MESSAGES = {
    ErrorKind.NOT_FOUND: lambda exc: _('This order return status does not exist.'),
    ErrorKind.DUPLICATE_NAME: lambda exc: (
        _('An order return status with the same name already exists: %s') % exc.name
    ),
    ErrorKind.CONSTRAINT_VIOLATION: _constraint_message,
    ErrorKind.MISSING_REQUIRED_FIELDS: _missing_fields_message,
    ErrorKind.GENERIC: _generic_message,
}


def check_exhaustive(table, table_name):
    missing = [kind.name for kind in ErrorKind if kind not in table]
    if missing:
        raise ImproperlyConfigured(
            f"{table_name} has no message for error kinds: {', '.join(missing)}"
        )


check_exhaustive(ORDER_STATE_MESSAGES, 'ORDER_STATE_MESSAGES')
check_exhaustive(ORDER_RETURN_STATE_MESSAGES, 'ORDER_RETURN_STATE_MESSAGES')


def translate(exc: BackOfficeDomainError) -> str:
    """
    Return the message an employee sees for a domain exception.

    Only BackOfficeDomainError subclasses are accepted; anything else is a
    programming error and belongs to the framework's error pages.
    """
    if not isinstance(exc, BackOfficeDomainError):
        raise TypeError(f"Cannot translate {type(exc).__name__}: not a back office domain error")

    if isinstance(exc, OrderReturnStateException):
        table = ORDER_RETURN_STATE_MESSAGES
    else:
        table = ORDER_STATE_MESSAGES

    return table[exc.kind](exc)
