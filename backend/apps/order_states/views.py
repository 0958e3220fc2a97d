"""
Back office pages for "Configure > Shop Parameters > Order Statuses".

Views are thin: they read through the query bus, write through the command
bus and turn domain exceptions into flash messages. Every collaborator is
handed over by urls.py through as_view().
"""
from django.conf import settings
from django.contrib import messages
from django.shortcuts import redirect, render
from django.utils.translation import gettext as _
from django.views import View
from common.models import AdminActionLog, Language
from common.services.logging_service import LoggingService
from apps.order_states.commands import GetOrderReturnStateForEditing, GetOrderStateForEditing
from apps.order_states.exceptions import OrderReturnStateException, OrderStateException
from apps.order_states.grids import (
    OrderReturnStatesGridDefinitionFactory,
    OrderStatesGridDefinitionFactory,
    SearchFilters,
    build_search_response,
    present_grid,
)
from apps.order_states.permissions import (
    CREATE_PERMISSION,
    READ_PERMISSION,
    UPDATE_PERMISSION,
    AdminSecurityMixin,
)
from apps.order_states.services.error_messages import translate

LISTING_ROUTE = 'order_states:index'


def add_flash_form_errors(request, form):
    for field_name, errors in form.errors.items():
        label = form.fields[field_name].label if field_name in form.fields else None
        for error in errors:
            messages.error(request, f"{label}: {error}" if label else error)


def _language_choices():
    return [
        {'id': language.iso_code, 'value': f'{language.iso_code} - {language.name}'}
        for language in Language.objects.active()
    ]


def _context_language():
    language = Language.objects.default()
    return language.iso_code if language else None


# ============================
# Listing
# ============================

class OrderStatesIndexView(AdminSecurityMixin, View):
    """
    Both grids of the page: order statuses and order return statuses.
    """
    permission_required = READ_PERMISSION
    order_states_grid_factory = None
    order_return_states_grid_factory = None

    def get(self, request):
        context = {}
        for context_name, grid_factory in (
            ('order_states_grid', self.order_states_grid_factory),
            ('order_return_states_grid', self.order_return_states_grid_factory),
        ):
            filters = SearchFilters.from_request(request.GET, grid_factory.get_definition())
            context[context_name] = present_grid(grid_factory.get_grid(filters))

        context['help_link'] = settings.ORDER_STATES_HELP_URL
        return render(request, 'order_states/index.html', context)


class OrderStatesSearchGridView(AdminSecurityMixin, View):
    """
    Process grid search.
    The order return statuses grid is searched only when its filter form
    posted the grid id; otherwise the order statuses grid is.
    """
    permission_required = READ_PERMISSION
    http_method_names = ['post']
    order_states_grid_factory = None
    order_return_states_grid_factory = None

    def post(self, request):
        grid_factory = self.order_states_grid_factory
        filter_id = OrderStatesGridDefinitionFactory.GRID_ID

        if OrderReturnStatesGridDefinitionFactory.GRID_ID in request.POST:
            grid_factory = self.order_return_states_grid_factory
            filter_id = OrderReturnStatesGridDefinitionFactory.GRID_ID

        return build_search_response(
            grid_factory.get_definition(),
            request,
            filter_id,
            LISTING_ROUTE,
        )


# ============================
# Create / edit forms
# ============================

class IdentifiableObjectFormView(AdminSecurityMixin, View):
    """
    Show a create or edit form and handle its submission.

    Success always leaves the form with a redirect to the listing. Domain
    rejections are flashed and the submitted form is rendered again.
    """
    form_builder = None
    form_handler = None
    query_bus = None

    template_name = None
    form_context_name = 'form'
    pk_url_kwarg = None
    domain_exception = None
    success_message = None
    admin_action = None
    target_model = None

    def get(self, request, **kwargs):
        return self.process(request)

    def post(self, request, **kwargs):
        return self.process(request)

    def get_object_id(self):
        return self.kwargs.get(self.pk_url_kwarg) if self.pk_url_kwarg else None

    def build_form(self, data):
        object_id = self.get_object_id()
        if object_id is None:
            return self.form_builder.get_form(data)
        return self.form_builder.get_form_for(object_id, data)

    def handle_form(self, form):
        object_id = self.get_object_id()
        if object_id is None:
            return self.form_handler.handle(form)
        return self.form_handler.handle_for(object_id, form)

    def get_context_data(self, form):
        return {
            self.form_context_name: form,
            'languages': _language_choices(),
            'context_lang_id': _context_language(),
            'help_link': settings.ORDER_STATES_HELP_URL,
        }

    def process(self, request):
        data = request.POST if request.method == 'POST' else None

        try:
            form = self.build_form(data)
        except self.domain_exception as e:
            messages.error(request, translate(e))
            return redirect(LISTING_ROUTE)

        try:
            result = self.handle_form(form)

            if result.is_submitted and result.is_valid:
                messages.success(request, _(self.success_message))
                LoggingService.log_admin_action(
                    request.user,
                    self.admin_action,
                    request,
                    target_model=self.target_model,
                    target_id=result.identifiable_object_id,
                )
                return redirect(LISTING_ROUTE)

            if result.is_submitted:
                add_flash_form_errors(request, form)
        except self.domain_exception as e:
            messages.error(request, translate(e))

        return render(request, self.template_name, self.get_context_data(form))


class OrderStateCreateView(IdentifiableObjectFormView):
    permission_required = CREATE_PERMISSION
    template_name = 'order_states/order_state_form.html'
    form_context_name = 'order_state_form'
    domain_exception = OrderStateException
    success_message = 'Successful creation.'
    admin_action = AdminActionLog.Action.CREATE_ORDER_STATE
    target_model = 'OrderState'

    def get_context_data(self, form):
        context = super().get_context_data(form)
        context['templates_preview_url'] = settings.MAIL_TEMPLATES_URL
        return context


class OrderStateEditView(OrderStateCreateView):
    permission_required = UPDATE_PERMISSION
    pk_url_kwarg = 'order_state_id'
    success_message = 'Successful update.'
    admin_action = AdminActionLog.Action.UPDATE_ORDER_STATE

    def get_context_data(self, form):
        context = super().get_context_data(form)
        context['editable_order_state'] = self.query_bus.handle(
            GetOrderStateForEditing(self.get_object_id())
        )
        return context


class OrderReturnStateCreateView(IdentifiableObjectFormView):
    permission_required = CREATE_PERMISSION
    template_name = 'order_states/order_return_state_form.html'
    form_context_name = 'order_return_state_form'
    domain_exception = OrderReturnStateException
    success_message = 'Successful creation.'
    admin_action = AdminActionLog.Action.CREATE_ORDER_RETURN_STATE
    target_model = 'OrderReturnState'


class OrderReturnStateEditView(OrderReturnStateCreateView):
    permission_required = UPDATE_PERMISSION
    pk_url_kwarg = 'order_return_state_id'
    success_message = 'Successful update.'
    admin_action = AdminActionLog.Action.UPDATE_ORDER_RETURN_STATE

    def get_context_data(self, form):
        context = super().get_context_data(form)
        context['editable_order_return_state'] = self.query_bus.handle(
            GetOrderReturnStateForEditing(self.get_object_id())
        )
        return context


# ============================
# Toggles
# ============================

class OrderStateToggleView(AdminSecurityMixin, View):
    """
    Toggle one order state option (delivery, invoice or send_email).
    Always redirects back to the listing, whatever the outcome.
    """
    permission_required = UPDATE_PERMISSION
    redirect_route = LISTING_ROUTE
    http_method_names = ['post']
    toggler = None
    attribute = None

    def post(self, request, order_state_id):
        try:
            new_value = self.toggler.toggle(order_state_id, self.attribute)

            messages.success(request, _('The status has been successfully updated.'))
            LoggingService.log_admin_action(
                request.user,
                AdminActionLog.Action.TOGGLE_ORDER_STATE,
                request,
                target_model='OrderState',
                target_id=order_state_id,
                details={'field': self.attribute, 'value': new_value},
            )
        except OrderStateException as e:
            messages.error(request, translate(e))

        return redirect(LISTING_ROUTE)
