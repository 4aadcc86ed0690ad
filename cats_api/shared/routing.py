"""
Route class that wraps endpoint results in the response envelope.

Routers declared with ``route_class=EnvelopeRoute`` let handlers return
plain payloads; the envelope is applied after the handler runs and
before serialization. Raw ``Response`` objects (streams, files) and
results already in envelope shape pass through untouched.
"""

import functools
import inspect
from typing import Any, Callable

from fastapi.datastructures import Default, DefaultPlaceholder
from fastapi.routing import APIRoute
from starlette.responses import Response

from cats_api.shared.response import ApiResponse, wrap_response


def _transform(result: Any) -> Any:
    if isinstance(result, Response):
        return result
    return wrap_response(result)


def _enveloped(endpoint: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap an endpoint so its result goes through ``wrap_response``.

    The wrapper keeps the endpoint's signature (via ``__wrapped__``) so
    FastAPI still resolves the same parameters and dependencies, and
    keeps it sync or async so FastAPI schedules it the same way.
    """
    if getattr(endpoint, "__enveloped__", False):
        return endpoint

    if inspect.iscoroutinefunction(endpoint):

        @functools.wraps(endpoint)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            return _transform(await endpoint(*args, **kwargs))

    else:

        @functools.wraps(endpoint)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return _transform(endpoint(*args, **kwargs))

    wrapper.__enveloped__ = True  # type: ignore[attr-defined]
    return wrapper


def envelope_model(endpoint: Callable[..., Any]) -> Any:
    """Return the response model for an endpoint's declared return type."""
    annotation = inspect.signature(endpoint).return_annotation
    if annotation is inspect.Signature.empty or annotation is None:
        return None
    if inspect.isclass(annotation) and issubclass(annotation, Response):
        return None
    if inspect.isclass(annotation) and issubclass(annotation, ApiResponse):
        return annotation
    return ApiResponse[annotation]


class EnvelopeRoute(APIRoute):
    """APIRoute applying the response envelope to every handler result."""

    def __init__(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        response_model: Any = Default(None),
        **kwargs: Any,
    ) -> None:
        if isinstance(response_model, DefaultPlaceholder):
            response_model = envelope_model(endpoint)
        super().__init__(
            path, _enveloped(endpoint), response_model=response_model, **kwargs
        )
