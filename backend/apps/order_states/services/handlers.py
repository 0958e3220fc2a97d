"""
Command and query handlers for order states and order return states.
All writes run in a transaction; edits lock the target row first.
"""
import logging
from typing import Dict, Optional
from django.db import transaction
from common.models import Language
from common.validators import is_generic_name, is_hex_color
from apps.order_states.commands import (
    ORDER_STATE_FLAGS,
    AddOrderReturnStateCommand,
    AddOrderStateCommand,
    EditableOrderReturnState,
    EditableOrderState,
    EditOrderReturnStateCommand,
    EditOrderStateCommand,
    GetOrderReturnStateForEditing,
    GetOrderStateForEditing,
)
from apps.order_states.exceptions import (
    DuplicateOrderReturnStateNameException,
    DuplicateOrderStateNameException,
    MissingOrderReturnStateRequiredFieldsException,
    MissingOrderStateRequiredFieldsException,
    OrderReturnStateConstraintException,
    OrderReturnStateNotFoundException,
    OrderStateConstraintException,
    OrderStateNotFoundException,
)
from apps.order_states.models import (
    OrderReturnState,
    OrderReturnStateTranslation,
    OrderState,
    OrderStateTranslation,
)

logger = logging.getLogger(__name__)


def _default_iso_code() -> Optional[str]:
    language = Language.objects.default()
    return language.iso_code if language else None


def _has_default_name(names: Dict[str, str]) -> bool:
    """Check the default language carries a non-blank name."""
    default_iso = _default_iso_code()
    if default_iso is None:
        return any((name or '').strip() for name in names.values())
    return bool((names.get(default_iso) or '').strip())


def _fill_missing_names(names: Dict[str, str]) -> Dict[str, str]:
    """Copy the default language name into every active language left blank."""
    default_name = (names.get(_default_iso_code()) or '').strip()
    filled = {}
    for language in Language.objects.active():
        name = (names.get(language.iso_code) or '').strip()
        filled[language.iso_code] = name or default_name
    return filled


# ============================
# Order states
# ============================

class OrderStateHandler:
    """Shared lookups and validation for order state handlers."""

    def get_order_state(self, order_state_id, for_update=False) -> OrderState:
        if not isinstance(order_state_id, int) or order_state_id <= 0:
            raise OrderStateConstraintException(
                f"Invalid order state id {order_state_id!r}",
                OrderStateConstraintException.INVALID_ID,
            )

        queryset = OrderState.objects.filter(deleted=False)
        if for_update:
            queryset = queryset.select_for_update()

        try:
            return queryset.get(pk=order_state_id)
        except OrderState.DoesNotExist:
            raise OrderStateNotFoundException(order_state_id)

    def assert_valid_color(self, color):
        if not is_hex_color(color):
            raise OrderStateConstraintException(
                f"Invalid color {color!r}",
                OrderStateConstraintException.INVALID_COLOR,
            )

    def assert_valid_names(self, names: Dict[str, str], exclude_id=None):
        """
        Raises:
            OrderStateConstraintException: a name holds forbidden characters
            DuplicateOrderStateNameException: a live order state already uses the name
        """
        for name in names.values():
            if name and not is_generic_name(name):
                raise OrderStateConstraintException(
                    f"Invalid order state name {name!r}",
                    OrderStateConstraintException.INVALID_NAME,
                )

        for iso_code, name in names.items():
            if not name:
                continue
            duplicates = OrderStateTranslation.objects.filter(
                language__iso_code=iso_code,
                name__iexact=name,
                order_state__deleted=False,
            )
            if exclude_id is not None:
                duplicates = duplicates.exclude(order_state_id=exclude_id)
            if duplicates.exists():
                raise DuplicateOrderStateNameException(name)

    def save_translations(self, order_state, names=None, templates=None):
        names = names or {}
        templates = templates or {}
        iso_codes = set(names) | set(templates)

        for language in Language.objects.filter(iso_code__in=iso_codes):
            translation, _ = OrderStateTranslation.objects.get_or_create(
                order_state=order_state,
                language=language,
            )
            if language.iso_code in names:
                translation.name = names[language.iso_code]
            if language.iso_code in templates:
                translation.template = templates[language.iso_code] or ''
            translation.save()


class AddOrderStateHandler(OrderStateHandler):

    @transaction.atomic
    def handle(self, command: AddOrderStateCommand) -> int:
        missing = []
        if not _has_default_name(command.names):
            missing.append('name')
        if not command.color:
            missing.append('color')
        if missing:
            raise MissingOrderStateRequiredFieldsException(missing)

        self.assert_valid_color(command.color)
        names = _fill_missing_names(command.names)
        self.assert_valid_names(names)

        order_state = OrderState.objects.create(
            color=command.color.upper(),
            **{flag: getattr(command, flag) for flag in ORDER_STATE_FLAGS}
        )
        self.save_translations(order_state, names, command.templates)

        logger.info(f"Order state {order_state.id} created")
        return order_state.id


class EditOrderStateHandler(OrderStateHandler):

    @transaction.atomic
    def handle(self, command: EditOrderStateCommand) -> int:
        order_state = self.get_order_state(command.order_state_id, for_update=True)
        changes = command.changed_fields()

        if 'names' in changes:
            if not _has_default_name(changes['names']):
                raise MissingOrderStateRequiredFieldsException(['name'])
            changes['names'] = _fill_missing_names(changes['names'])
            self.assert_valid_names(changes['names'], exclude_id=order_state.id)

        if 'color' in changes:
            self.assert_valid_color(changes['color'])
            order_state.color = changes['color'].upper()

        for flag in ORDER_STATE_FLAGS:
            if flag in changes:
                setattr(order_state, flag, changes[flag])

        order_state.save()
        self.save_translations(order_state, changes.get('names'), changes.get('templates'))

        logger.info(f"Order state {order_state.id} updated: {', '.join(sorted(changes)) or 'no changes'}")
        return order_state.id


class GetOrderStateForEditingHandler(OrderStateHandler):

    def handle(self, query: GetOrderStateForEditing) -> EditableOrderState:
        order_state = self.get_order_state(query.order_state_id, for_update=query.for_update)
        translations = order_state.translations.select_related('language')

        return EditableOrderState(
            order_state_id=order_state.id,
            names={t.language.iso_code: t.name for t in translations},
            templates={t.language.iso_code: t.template for t in translations},
            color=order_state.color,
            **{flag: getattr(order_state, flag) for flag in ORDER_STATE_FLAGS}
        )


# ============================
# Order return states
# ============================

class OrderReturnStateHandler:
    """Shared lookups and validation for order return state handlers."""

    def get_order_return_state(self, order_return_state_id, for_update=False) -> OrderReturnState:
        if not isinstance(order_return_state_id, int) or order_return_state_id <= 0:
            raise OrderReturnStateConstraintException(
                f"Invalid order return state id {order_return_state_id!r}",
                OrderReturnStateConstraintException.INVALID_ID,
            )

        queryset = OrderReturnState.objects.all()
        if for_update:
            queryset = queryset.select_for_update()

        try:
            return queryset.get(pk=order_return_state_id)
        except OrderReturnState.DoesNotExist:
            raise OrderReturnStateNotFoundException(order_return_state_id)

    def assert_valid_color(self, color):
        if not is_hex_color(color):
            raise OrderReturnStateConstraintException(
                f"Invalid color {color!r}",
                OrderReturnStateConstraintException.INVALID_COLOR,
            )

    def assert_valid_names(self, names: Dict[str, str], exclude_id=None):
        for name in names.values():
            if name and not is_generic_name(name):
                raise OrderReturnStateConstraintException(
                    f"Invalid order return state name {name!r}",
                    OrderReturnStateConstraintException.INVALID_NAME,
                )

        for iso_code, name in names.items():
            if not name:
                continue
            duplicates = OrderReturnStateTranslation.objects.filter(
                language__iso_code=iso_code,
                name__iexact=name,
            )
            if exclude_id is not None:
                duplicates = duplicates.exclude(order_return_state_id=exclude_id)
            if duplicates.exists():
                raise DuplicateOrderReturnStateNameException(name)

    def save_translations(self, order_return_state, names):
        for language in Language.objects.filter(iso_code__in=set(names)):
            OrderReturnStateTranslation.objects.update_or_create(
                order_return_state=order_return_state,
                language=language,
                defaults={'name': names[language.iso_code]},
            )


class AddOrderReturnStateHandler(OrderReturnStateHandler):

    @transaction.atomic
    def handle(self, command: AddOrderReturnStateCommand) -> int:
        missing = []
        if not _has_default_name(command.names):
            missing.append('name')
        if not command.color:
            missing.append('color')
        if missing:
            raise MissingOrderReturnStateRequiredFieldsException(missing)

        self.assert_valid_color(command.color)
        names = _fill_missing_names(command.names)
        self.assert_valid_names(names)

        order_return_state = OrderReturnState.objects.create(color=command.color.upper())
        self.save_translations(order_return_state, names)

        logger.info(f"Order return state {order_return_state.id} created")
        return order_return_state.id


class EditOrderReturnStateHandler(OrderReturnStateHandler):

    @transaction.atomic
    def handle(self, command: EditOrderReturnStateCommand) -> int:
        order_return_state = self.get_order_return_state(command.order_return_state_id, for_update=True)
        changes = command.changed_fields()

        if 'names' in changes:
            if not _has_default_name(changes['names']):
                raise MissingOrderReturnStateRequiredFieldsException(['name'])
            changes['names'] = _fill_missing_names(changes['names'])
            self.assert_valid_names(changes['names'], exclude_id=order_return_state.id)

        if 'color' in changes:
            self.assert_valid_color(changes['color'])
            order_return_state.color = changes['color'].upper()

        order_return_state.save()
        if 'names' in changes:
            self.save_translations(order_return_state, changes['names'])

        logger.info(f"Order return state {order_return_state.id} updated")
        return order_return_state.id


class GetOrderReturnStateForEditingHandler(OrderReturnStateHandler):

    def handle(self, query: GetOrderReturnStateForEditing) -> EditableOrderReturnState:
        order_return_state = self.get_order_return_state(query.order_return_state_id)
        translations = order_return_state.translations.select_related('language')

        return EditableOrderReturnState(
            order_return_state_id=order_return_state.id,
            names={t.language.iso_code: t.name for t in translations},
            color=order_return_state.color,
        )
