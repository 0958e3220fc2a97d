"""
Logging service for tracking back office actions.
"""
from common.models import AdminActionLog
import logging

logger = logging.getLogger('security')


class LoggingService:
    """
    Centralized logging service for back office events.
    """

    @staticmethod
    def get_client_ip(request):
        """Extract client IP from request"""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            ip = x_forwarded_for.split(',')[0].strip()
        else:
            ip = request.META.get('REMOTE_ADDR')
        return ip

    @staticmethod
    def get_user_agent(request):
        """Extract user agent from request"""
        return request.META.get('HTTP_USER_AGENT', '')

    # ==================== Admin Action Logging ====================

    @staticmethod
    def log_admin_action(admin_user, action, request, target_model='', target_id='', details=None):
        """
        Log admin actions (create, update, toggle...)

        Args:
            admin_user: Employee performing the action
            action: AdminActionLog.Action choice
            request: HTTP request object
            target_model: Name of the model affected (optional)
            target_id: Identifier of the affected object (optional)
            details: Additional details dict (optional)

        Returns:
            The created AdminActionLog, or None when it could not be written
        """
        try:
            log = AdminActionLog.objects.create(
                admin_user=admin_user if admin_user and admin_user.is_authenticated else None,
                action=action,
                target_model=target_model,
                target_id=str(target_id) if target_id is not None else '',
                details=details or {},
                ip_address=LoggingService.get_client_ip(request),
                user_agent=LoggingService.get_user_agent(request)
            )

            # Also log to file
            target_str = f"→ {target_model} #{target_id}" if target_id else ""
            logger.info(f"[ADMIN ACTION] {admin_user} {action} {target_str}")

            return log
        except Exception as e:
            logger.error(f"Failed to create admin action log: {str(e)}")
            return None

    @staticmethod
    def log_permission_denied(user, permission, request):
        """Log when an employee hits a back office action they are not granted"""
        logger.warning(
            f"[PERMISSION DENIED] {user} lacks {permission} on {request.path} "
            f"from {LoggingService.get_client_ip(request)}"
        )
