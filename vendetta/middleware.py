import logging

from django.http import JsonResponse

from vendetta.errors import ReputationError

logger = logging.getLogger(__name__)


class ReputationErrorMiddleware:
    """Turns domain errors raised by views into JSON error responses."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, ReputationError):
            return None

        if exception.status_code >= 500:
            logger.error(f"[Edge] {request.method} {request.path}: {exception.message}")
        else:
            logger.info(
                f"[Edge] {request.method} {request.path} -> "
                f"{exception.status_code}: {exception.message}"
            )
        return JsonResponse({"error": exception.message}, status=exception.status_code)
