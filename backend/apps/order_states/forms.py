"""
Order status forms.
Forms validate input; builders pre-fill them from the query bus and
handlers turn valid forms into commands.
"""
from dataclasses import dataclass
from typing import Optional
from django import forms
from common.models import Language
from common.validators import validate_hex_color
from apps.order_states.commands import (
    ORDER_STATE_FLAGS,
    AddOrderReturnStateCommand,
    AddOrderStateCommand,
    EditOrderReturnStateCommand,
    EditOrderStateCommand,
)

FLAG_LABELS = {
    'logable': 'Consider the associated order as validated.',
    'invoice': 'Allow a customer to download and view PDF versions of their invoices.',
    'hidden': 'Hide this status in all customer orders.',
    'send_email': 'Send an email to the customer when their order status has changed.',
    'pdf_invoice': 'Attach invoice PDF to email.',
    'pdf_delivery': 'Attach delivery slip PDF to email.',
    'shipped': 'Set the order as shipped.',
    'paid': 'Set the order as paid.',
    'delivery': 'Show delivery PDF.',
}


class LocalizedForm(forms.Form):
    """Form with one field per active language for each localized value."""

    localized_fields = {}

    def __init__(self, *args, languages=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.languages = list(languages if languages is not None else Language.objects.active())

        for prefix, (label, max_length) in self.localized_fields.items():
            for language in self.languages:
                self.fields[f'{prefix}_{language.iso_code}'] = forms.CharField(
                    label=f'{label} ({language.iso_code})',
                    max_length=max_length,
                    required=False,
                )

    def localized(self, prefix):
        """Cleaned values of a localized field keyed by language ISO code."""
        return {
            language.iso_code: self.cleaned_data.get(f'{prefix}_{language.iso_code}', '')
            for language in self.languages
        }

    def bound_localized(self, prefix):
        return [self[f'{prefix}_{language.iso_code}'] for language in self.languages]

    @property
    def localized_names(self):
        return self.bound_localized('name')

    @staticmethod
    def localized_initial(prefix, values):
        return {f'{prefix}_{iso_code}': value for iso_code, value in values.items()}


class OrderStateForm(LocalizedForm):
    localized_fields = {
        'name': ('Status name', 64),
        'template': ('Template', 64),
    }

    color = forms.CharField(max_length=7, initial='#FFFFFF', validators=[validate_hex_color])

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for flag in ORDER_STATE_FLAGS:
            self.fields[flag] = forms.BooleanField(label=FLAG_LABELS[flag], required=False)

    @property
    def localized_templates(self):
        return self.bound_localized('template')

    @property
    def flag_fields(self):
        return [self[flag] for flag in ORDER_STATE_FLAGS]

    @classmethod
    def initial_from(cls, editable):
        initial = {'color': editable.color}
        initial.update(cls.localized_initial('name', editable.names))
        initial.update(cls.localized_initial('template', editable.templates))
        for flag in ORDER_STATE_FLAGS:
            initial[flag] = getattr(editable, flag)
        return initial

    def _command_data(self):
        data = {
            'names': self.localized('name'),
            'templates': self.localized('template'),
            'color': self.cleaned_data['color'].upper(),
        }
        for flag in ORDER_STATE_FLAGS:
            data[flag] = self.cleaned_data.get(flag, False)
        return data

    def to_add_command(self):
        return AddOrderStateCommand(**self._command_data())

    def to_edit_command(self, order_state_id):
        return EditOrderStateCommand(order_state_id=order_state_id, **self._command_data())


class OrderReturnStateForm(LocalizedForm):
    localized_fields = {
        'name': ('Status name', 64),
    }

    color = forms.CharField(max_length=7, initial='#FFFFFF', validators=[validate_hex_color])

    @classmethod
    def initial_from(cls, editable):
        initial = {'color': editable.color}
        initial.update(cls.localized_initial('name', editable.names))
        return initial

    def to_add_command(self):
        return AddOrderReturnStateCommand(
            names=self.localized('name'),
            color=self.cleaned_data['color'].upper(),
        )

    def to_edit_command(self, order_return_state_id):
        return EditOrderReturnStateCommand(
            order_return_state_id=order_return_state_id,
            names=self.localized('name'),
            color=self.cleaned_data['color'].upper(),
        )


# ============================
# Builders and handlers
# ============================

class FormBuilder:
    """
    Builds blank or pre-filled forms.

    `query_class` is the query returning the editable projection of an
    object; its single positional argument is the object id.
    """

    def __init__(self, form_class, query_bus, query_class):
        self.form_class = form_class
        self.query_bus = query_bus
        self.query_class = query_class

    def get_form(self, data=None):
        return self.form_class(data=data)

    def get_form_for(self, object_id, data=None):
        editable = self.query_bus.handle(self.query_class(object_id))
        return self.form_class(data=data, initial=self.form_class.initial_from(editable))


@dataclass(frozen=True)
class FormHandlerResult:
    is_submitted: bool
    is_valid: bool
    identifiable_object_id: Optional[int] = None

    @classmethod
    def not_submitted(cls):
        return cls(is_submitted=False, is_valid=False)

    @classmethod
    def invalid(cls):
        return cls(is_submitted=True, is_valid=False)

    @classmethod
    def successful(cls, object_id):
        return cls(is_submitted=True, is_valid=True, identifiable_object_id=object_id)


class FormHandler:
    """
    Dispatches the command built by a valid form.
    Domain exceptions raised by the command handler propagate to the caller.
    """

    def __init__(self, command_bus):
        self.command_bus = command_bus

    def handle(self, form) -> FormHandlerResult:
        if not form.is_bound:
            return FormHandlerResult.not_submitted()
        if not form.is_valid():
            return FormHandlerResult.invalid()

        object_id = self.command_bus.handle(form.to_add_command())
        return FormHandlerResult.successful(object_id)

    def handle_for(self, object_id, form) -> FormHandlerResult:
        if not form.is_bound:
            return FormHandlerResult.not_submitted()
        if not form.is_valid():
            return FormHandlerResult.invalid()

        self.command_bus.handle(form.to_edit_command(object_id))
        return FormHandlerResult.successful(object_id)
