"""
Unified response envelope.

Every successful response and every business failure leaves the API as
``{"data": ..., "code": ..., "message": ...}``. ``code`` is 200 only on
success; business failures carry a business code at HTTP 200.
"""

from collections.abc import Mapping
from enum import IntEnum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

SUCCESS_MESSAGE = "success"


class ResponseCode(IntEnum):
    """Reserved envelope codes. Business codes outside this set are allowed."""

    SUCCESS = 200
    BUSINESS_ERROR = 0
    ERROR = 500
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    BAD_REQUEST = 400


class Page(BaseModel, Generic[T]):
    """One page of a listing, serialized as ``{list, page, pageSize, total}``."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[T] = Field(alias="list")
    page: int
    page_size: int = Field(alias="pageSize")
    total: int


class ApiResponse(BaseModel, Generic[T]):
    """Response envelope carrying a payload, a code and a message."""

    data: Optional[T] = None
    code: int
    message: str

    @classmethod
    def success(cls, data: Any, message: str = SUCCESS_MESSAGE) -> "ApiResponse":
        return cls(data=data, code=int(ResponseCode.SUCCESS), message=message)

    @classmethod
    def custom(cls, data: Any, code: int, message: str) -> "ApiResponse":
        return cls(data=data, code=int(code), message=message)

    @classmethod
    def error(
        cls,
        data: Any = None,
        code: int = ResponseCode.BUSINESS_ERROR,
        message: str = "error",
    ) -> "ApiResponse":
        return cls(data=data, code=int(code), message=message)

    @classmethod
    def paginated(
        cls, items: list[Any], page: int, page_size: int, total: int
    ) -> "ApiResponse":
        """Wrap a page of items in a success envelope."""
        return cls.success(
            Page(items=items, page=page, page_size=page_size, total=total)
        )


def wrap_response(result: Any) -> Any:
    """Normalize a handler result to the envelope shape.

    Results that already are envelopes (an ``ApiResponse`` or a mapping
    with a ``data`` key) pass through unchanged.
    """
    if isinstance(result, ApiResponse):
        return result
    if isinstance(result, Mapping) and "data" in result:
        return result
    return ApiResponse.success(result)
