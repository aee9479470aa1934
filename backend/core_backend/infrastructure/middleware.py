import logging
import time
import uuid

from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(MiddlewareMixin):
    """
    Logs one line per API request with its status code and duration.

    A request id is taken from the ``X-Request-ID`` header (or generated)
    and echoed back on the response so client and server logs line up.
    """

    HEADER = "HTTP_X_REQUEST_ID"

    def process_request(self, request):
        request.request_id = request.META.get(self.HEADER) or str(uuid.uuid4())
        request._started_at = time.monotonic()

    def process_response(self, request, response):
        request_id = getattr(request, "request_id", None)
        started_at = getattr(request, "_started_at", None)

        if request.path.startswith("/api/") and started_at is not None:
            duration_ms = (time.monotonic() - started_at) * 1000
            logger.info(
                f"{request.method} {request.path} -> {response.status_code} "
                f"({duration_ms:.1f}ms) request_id={request_id}"
            )

        if request_id:
            response["X-Request-ID"] = request_id
        return response
