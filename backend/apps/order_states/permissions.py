"""
Order status permissions.

One set of model permissions (those of OrderState) governs both the order
statuses and the order return statuses pages.
"""
from django.contrib import messages
from django.contrib.auth.mixins import PermissionRequiredMixin
from django.shortcuts import redirect
from common.services.logging_service import LoggingService

READ_PERMISSION = 'order_states.view_orderstate'
CREATE_PERMISSION = 'order_states.add_orderstate'
UPDATE_PERMISSION = 'order_states.change_orderstate'


class AdminSecurityMixin(PermissionRequiredMixin):
    """
    Permission: employee must hold `permission_required`.

    Anonymous users are sent to the login page. Employees missing the
    permission get a 403, unless the view names a `redirect_route`: they
    are then redirected there with `denied_message` flashed.
    """
    redirect_route = None
    denied_message = "You do not have permission to edit this."

    def handle_no_permission(self):
        user = self.request.user
        if user.is_authenticated:
            LoggingService.log_permission_denied(user, self.get_permission_required(), self.request)
            if self.redirect_route:
                messages.error(self.request, self.denied_message)
                return redirect(self.redirect_route)
        return super().handle_no_permission()

