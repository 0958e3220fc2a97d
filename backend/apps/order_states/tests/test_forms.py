"""
Tests for order status forms, form builders and form handlers.
"""
from apps.order_states.commands import (
    AddOrderReturnStateCommand,
    EditableOrderState,
    EditOrderStateCommand,
    GetOrderStateForEditing,
)
from apps.order_states.exceptions import OrderStateNotFoundException
from apps.order_states.forms import FormBuilder, FormHandler, OrderReturnStateForm, OrderStateForm
from apps.order_states.tests.base import BaseOrderStatesTestCase, RecordingBus


class OrderStateFormTestCase(BaseOrderStatesTestCase):
    """Test the order state form."""

    def test_fields_per_active_language(self):
        form = OrderStateForm()

        for name in ('name_en', 'name_fr', 'template_en', 'template_fr', 'color', 'delivery'):
            self.assertIn(name, form.fields)
        self.assertEqual(len(form.localized_names), 2)
        self.assertEqual(len(form.flag_fields), 9)

    def test_inactive_language_has_no_field(self):
        self.french.is_active = False
        self.french.save()

        self.assertNotIn('name_fr', OrderStateForm().fields)

    def test_invalid_color(self):
        form = OrderStateForm(data={'name_en': 'Shipped', 'color': '#12345G'})

        self.assertFalse(form.is_valid())
        self.assertIn('color', form.errors)

    def test_to_add_command(self):
        form = OrderStateForm(data={'name_en': 'Shipped', 'name_fr': 'Expédié', 'color': '#8a2be2',
                                    'shipped': 'on'})
        self.assertTrue(form.is_valid())

        command = form.to_add_command()

        self.assertEqual(command.names, {'en': 'Shipped', 'fr': 'Expédié'})
        self.assertEqual(command.templates, {'en': '', 'fr': ''})
        self.assertEqual(command.color, '#8A2BE2')
        self.assertTrue(command.shipped)
        self.assertFalse(command.paid)

    def test_to_edit_command(self):
        form = OrderStateForm(data={'name_en': 'Shipped', 'color': '#FFFFFF'})
        self.assertTrue(form.is_valid())

        command = form.to_edit_command(4)

        self.assertEqual(command.order_state_id, 4)
        self.assertEqual(command.changed_fields()['delivery'], False)


class FormBuilderTestCase(BaseOrderStatesTestCase):

    def test_prefills_from_query(self):
        editable = EditableOrderState(
            order_state_id=3, names={'en': 'Paid', 'fr': 'Payé'}, templates={'en': 'payment'},
            color='#32CD32', paid=True,
        )
        query_bus = RecordingBus({GetOrderStateForEditing: editable})

        form = FormBuilder(OrderStateForm, query_bus, GetOrderStateForEditing).get_form_for(3)

        self.assertEqual(query_bus.messages, [GetOrderStateForEditing(3)])
        self.assertFalse(form.is_bound)
        self.assertEqual(form.initial['name_fr'], 'Payé')
        self.assertEqual(form.initial['template_en'], 'payment')
        self.assertTrue(form.initial['paid'])

    def test_missing_object_propagates(self):
        query_bus = RecordingBus({GetOrderStateForEditing: OrderStateNotFoundException(3)})

        with self.assertRaises(OrderStateNotFoundException):
            FormBuilder(OrderStateForm, query_bus, GetOrderStateForEditing).get_form_for(3)


class FormHandlerTestCase(BaseOrderStatesTestCase):
    """Test form submission handling."""

    def test_unbound_form_is_not_submitted(self):
        command_bus = RecordingBus()

        result = FormHandler(command_bus).handle(OrderStateForm())

        self.assertFalse(result.is_submitted)
        self.assertEqual(command_bus.messages, [])

    def test_invalid_form_dispatches_nothing(self):
        command_bus = RecordingBus()

        result = FormHandler(command_bus).handle_for(2, OrderStateForm(data={'color': 'red'}))

        self.assertTrue(result.is_submitted)
        self.assertFalse(result.is_valid)
        self.assertEqual(command_bus.messages, [])

    def test_valid_add_returns_new_id(self):
        command_bus = RecordingBus({AddOrderReturnStateCommand: 12})
        form = OrderReturnStateForm(data={'name_en': 'Package received', 'color': '#32CD32'})

        result = FormHandler(command_bus).handle(form)

        self.assertTrue(result.is_valid)
        self.assertEqual(result.identifiable_object_id, 12)
        self.assertIsInstance(command_bus.messages[0], AddOrderReturnStateCommand)

    def test_valid_edit_keeps_object_id(self):
        command_bus = RecordingBus()
        form = OrderStateForm(data={'name_en': 'Shipped', 'color': '#FFFFFF'})

        result = FormHandler(command_bus).handle_for(8, form)

        self.assertEqual(result.identifiable_object_id, 8)
        self.assertIsInstance(command_bus.messages[0], EditOrderStateCommand)
