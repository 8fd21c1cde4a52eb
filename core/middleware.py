# =============== MIDDLEWARE FOR REQUEST LOGGING ===============
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """Log one line per request with its outcome"""
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        logger.info(
            f"{request.method} {request.get_full_path()} -> "
            f"{response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response
