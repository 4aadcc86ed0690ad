"""
HTTP middleware.

- UnhandledErrorMiddleware: hands unknown exceptions to the translator.
- ResponseHeadersMiddleware: secure headers and trace id echo.
- RequestLoggingMiddleware: one INFO access line per request.

No business logic. Pure cross-cutting concerns.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from cats_api.shared.errors.handlers import TRACE_ID_HEADER, ExceptionTranslator

logger = logging.getLogger("cats_api.http")

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "X-XSS-Protection": "1; mode=block",
}


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Translate exceptions that no registered handler claimed."""

    def __init__(self, app: ASGIApp, translator: ExceptionTranslator) -> None:
        super().__init__(app)
        self._translator = translator

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return self._translator.translate(request, exc)


class ResponseHeadersMiddleware(BaseHTTPMiddleware):
    """Add secure headers and echo the caller's trace id on every response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value

        trace_id = request.headers.get(TRACE_ID_HEADER)
        if trace_id and TRACE_ID_HEADER not in response.headers:
            response.headers[TRACE_ID_HEADER] = trace_id
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and duration. Never logs bodies."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        # Faults are already logged by the exception translator
        logger.info(
            "%s %s completed - status=%d duration=%.1fms",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response
