"""
Reusable permission classes for the back office API.
"""
from rest_framework.permissions import BasePermission


class IsActiveStaff(BasePermission):
    """
    Permission check to ensure the user is an active employee.
    """
    message = "Only back office employees can access this resource."

    def has_permission(self, request, view):
        return (
            request.user.is_authenticated and
            request.user.is_active and
            request.user.is_staff
        )


class HasModelPermission(BasePermission):
    """
    Permission check against the Django permission named by the view's
    `required_permission` attribute.
    """
    message = "You do not have permission to access this resource."

    def has_permission(self, request, view):
        permission = getattr(view, 'required_permission', None)
        if permission is None:
            return True

        return request.user.is_authenticated and request.user.has_perm(permission)
