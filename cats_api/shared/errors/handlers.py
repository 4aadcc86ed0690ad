"""
Exception translation for FastAPI.

Every fault that reaches the request boundary is converted here into
exactly one JSON response and logged exactly once:

- BusinessError: HTTP 200 with the envelope ``{data, code, message}``.
- Framework HTTP errors and request validation errors: the derived
  status with ``{code, message, details?, traceId, timestamp, path}``.
- Anything else: HTTP 500 with a fixed public message. The real message
  is only exposed as ``details`` outside production.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional, Union
from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from cats_api.shared.errors.business import BusinessError

TRACE_ID_HEADER = "x-trace-id"
INTERNAL_ERROR_CODE = "INTERNAL_SERVER_ERROR"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"
MESSAGE_SEPARATOR = ", "


@dataclass(frozen=True)
class BusinessFault:
    """An expected domain-rule violation."""

    error: BusinessError


@dataclass(frozen=True)
class ProtocolFault:
    """A malformed or refused request recognized by the framework layer."""

    exc: Exception
    status_code: int
    code: str
    message: str
    details: Any = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class UnknownFault:
    """Anything else. Internals stay hidden in production."""

    exc: Exception


Fault = Union[BusinessFault, ProtocolFault, UnknownFault]


def resolve_trace_id(request: Request) -> str:
    """Return the caller's ``x-trace-id`` or a fresh UUID4."""
    return request.headers.get(TRACE_ID_HEADER) or str(uuid4())


def _status_name(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).name
    except ValueError:
        return str(status_code)


def _status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "HTTP error"


def _join_message(message: Any) -> Optional[str]:
    """Collapse a list of messages into one string."""
    if isinstance(message, (list, tuple)):
        return MESSAGE_SEPARATOR.join(str(item) for item in message)
    if message is None or message == "":
        return None
    return str(message)


def _validation_fault(exc: RequestValidationError) -> ProtocolFault:
    """Flatten pydantic validation errors into one readable message."""
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())]
        # Drop the "body"/"query"/"path" prefix, keep the field path.
        field_path = ".".join(location[1:] or location)
        details.append({"field": field_path, "message": error.get("msg", "")})

    status_code = HTTPStatus.BAD_REQUEST
    return ProtocolFault(
        exc=exc,
        status_code=status_code,
        code=status_code.name,
        message=MESSAGE_SEPARATOR.join(
            f"{item['field']}: {item['message']}" for item in details
        ) or status_code.phrase,
        details=details,
    )


def _http_fault(exc: StarletteHTTPException) -> ProtocolFault:
    """Derive status, code and message from a framework HTTP exception."""
    status_code = exc.status_code
    code = _status_name(status_code)
    details = None
    detail = exc.detail

    if isinstance(detail, Mapping):
        code = detail.get("error") or code
        message = _join_message(detail.get("message"))
        details = detail.get("details")
    else:
        message = _join_message(detail)

    return ProtocolFault(
        exc=exc,
        status_code=status_code,
        code=str(code),
        message=message or _status_phrase(status_code),
        details=details,
        headers=dict(getattr(exc, "headers", None) or {}),
    )


def classify(exc: Exception) -> Fault:
    """Sort a raised exception into one of the three fault kinds."""
    if isinstance(exc, BusinessError):
        return BusinessFault(exc)
    if isinstance(exc, RequestValidationError):
        return _validation_fault(exc)
    if isinstance(exc, StarletteHTTPException):
        return _http_fault(exc)
    return UnknownFault(exc)


class ExceptionTranslator:
    """Single chokepoint converting faults into responses.

    Stateless between requests. The logger is injected so the caller
    decides where failures are written.
    """

    def __init__(self, logger: logging.Logger, expose_details: bool = False) -> None:
        """Initialize the translator.

        Args:
            logger: Sink for the one log line written per fault.
            expose_details: Include the real message of unknown faults
                in the response. Must be False in production.
        """
        self._logger = logger
        self._expose_details = expose_details

    async def handle(self, request: Request, exc: Exception) -> JSONResponse:
        """Starlette exception handler entry point."""
        return self.translate(request, exc)

    def translate(self, request: Request, exc: Exception) -> JSONResponse:
        """Convert one fault into its response, logging it once."""
        trace_id = resolve_trace_id(request)
        fault = classify(exc)

        if isinstance(fault, BusinessFault):
            response = self._render_business(request, fault, trace_id)
        elif isinstance(fault, ProtocolFault):
            response = self._render_protocol(request, fault, trace_id)
        else:
            response = self._render_unknown(request, fault, trace_id)

        response.headers[TRACE_ID_HEADER] = trace_id
        return response

    def _render_business(
        self, request: Request, fault: BusinessFault, trace_id: str
    ) -> JSONResponse:
        error = fault.error
        self._logger.warning(
            "[Business Exception] [%s] %s - Code: %s - Message: %s - TraceId: %s",
            request.method,
            request.url.path,
            error.business_code,
            error.message,
            trace_id,
        )
        return JSONResponse(
            status_code=HTTPStatus.OK,
            content=error.to_response().model_dump(mode="json"),
        )

    def _render_protocol(
        self, request: Request, fault: ProtocolFault, trace_id: str
    ) -> JSONResponse:
        self._logger.error(
            "[HTTP Exception] [%s] %s - Status: %s - TraceId: %s",
            request.method,
            request.url.path,
            fault.status_code,
            trace_id,
            exc_info=fault.exc,
        )
        body = _error_body(
            request, fault.code, fault.message, fault.details, trace_id
        )
        return JSONResponse(
            status_code=fault.status_code, content=body, headers=fault.headers
        )

    def _render_unknown(
        self, request: Request, fault: UnknownFault, trace_id: str
    ) -> JSONResponse:
        real_message = str(fault.exc) or type(fault.exc).__name__
        self._logger.error(
            "[Unknown Exception] [%s] %s - %s - TraceId: %s",
            request.method,
            request.url.path,
            real_message,
            trace_id,
            exc_info=fault.exc,
        )
        details = real_message if self._expose_details else None
        body = _error_body(
            request, INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE, details, trace_id
        )
        return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content=body)


def _error_body(
    request: Request, code: str, message: str, details: Any, trace_id: str
) -> dict[str, Any]:
    """Build the wire shape shared by protocol and unknown faults."""
    body: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        body["details"] = details
    body["traceId"] = trace_id
    body["timestamp"] = (
        datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    )
    body["path"] = request.url.path
    return body


def register_error_handlers(
    app: FastAPI, translator: ExceptionTranslator
) -> None:
    """Route business and framework exceptions through the translator.

    Unknown exceptions are caught by ``UnhandledErrorMiddleware`` so that
    they are answered and logged once instead of being re-raised to the
    server.

    Args:
        app: The FastAPI application instance.
        translator: The translator shared with the middleware.
    """
    app.add_exception_handler(BusinessError, translator.handle)
    app.add_exception_handler(RequestValidationError, translator.handle)
    app.add_exception_handler(StarletteHTTPException, translator.handle)
