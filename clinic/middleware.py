import logging
import time

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Log one line per request with the status code and duration."""
    SKIP_PREFIXES = ('/static/', '/metrics')

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        path = request.path or ''
        if path.startswith(self.SKIP_PREFIXES):
            return self.get_response(request)
        started = time.monotonic()
        response = self.get_response(request)
        user = getattr(request, 'user', None)
        logger.info(
            'request method=%s path=%s status=%s duration_ms=%.1f user=%s',
            request.method, path, response.status_code, (time.monotonic() - started) * 1000,
            getattr(user, 'email', None) if user is not None and user.is_authenticated else '-',
        )
        return response
