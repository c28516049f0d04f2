"""
Request ID middleware for tracing requests through logs.

Adds a unique request ID to each request so that log entries emitted while
serving it (logins, registrations, admin edits) can be correlated.
"""

import uuid
from collections.abc import Callable

from django.http import HttpRequest, HttpResponse

import structlog

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware:
    """
    Middleware that generates a unique request ID for each request.

    The request ID is:
    - Accepted from the X-Request-ID header if present (for load balancer tracing)
    - Generated as a new UUID otherwise
    - Stored on the request as request.id
    - Bound into structlog contextvars for the duration of the request
    - Echoed in the X-Request-ID response header
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        request.id = request_id  # type: ignore

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        try:
            response = self.get_response(request)
        finally:
            structlog.contextvars.clear_contextvars()

        response[REQUEST_ID_HEADER] = request_id
        return response
