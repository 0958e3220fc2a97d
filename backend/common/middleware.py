"""
Custom middleware for back office logging.
"""
import logging
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger('back_office')


class BackOfficeLoggingMiddleware(MiddlewareMixin):
    """
    Middleware to log mutating requests made against back office pages.
    """

    # Paths that should be logged
    MONITORED_PATHS = [
        '/admin/order-states/',
    ]

    SAFE_METHODS = ('GET', 'HEAD', 'OPTIONS')

    def process_response(self, request, response):
        # Only log monitored paths
        if not any(request.path.startswith(path) for path in self.MONITORED_PATHS):
            return response

        if request.method in self.SAFE_METHODS:
            return response

        user = getattr(request, 'user', None)
        username = user.get_username() if user is not None and user.is_authenticated else 'anonymous'

        if response.status_code >= 400:
            logger.warning(
                f"{request.method} {request.path} by {username} "
                f"from IP {self.get_client_ip(request)} -> {response.status_code}"
            )
        else:
            logger.info(
                f"{request.method} {request.path} by {username} "
                f"from IP {self.get_client_ip(request)} -> {response.status_code}"
            )

        return response

    @staticmethod
    def get_client_ip(request):
        """Extract client IP from request."""
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            ip = x_forwarded_for.split(',')[0]
        else:
            ip = request.META.get('REMOTE_ADDR')
        return ip
