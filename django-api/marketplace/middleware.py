"""Access log for API requests."""

import logging
import time

logger = logging.getLogger("marketplace.requests")

MAX_LINE_LENGTH = 80


class RequestLogMiddleware:
    """Log ``METHOD path status in Nms`` for every /api request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        if request.path.startswith("/api"):
            elapsed_ms = (time.monotonic() - started) * 1000
            line = f"{request.method} {request.path} {response.status_code} in {elapsed_ms:.0f}ms"
            if len(line) > MAX_LINE_LENGTH:
                line = line[: MAX_LINE_LENGTH - 1] + "…"
            logger.info(line)
        return response
