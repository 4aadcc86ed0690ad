"""
Business errors.

A business error is an expected domain-rule violation. It is always
reported at HTTP 200 with a business code in the envelope, never as a
transport failure. Use cases raise it and never catch it themselves.

Example:
    raise BusinessError(1001, "Out of stock", {"productId": 12})
    raise BusinessError.not_found("User does not exist")
"""

from typing import Any

from cats_api.shared.response import ApiResponse, ResponseCode


class BusinessError(Exception):
    """Domain failure carrying a business code, a message and optional data."""

    def __init__(self, business_code: int, message: str, data: Any = None) -> None:
        self.business_code = int(business_code)
        self.message = message
        self.data = data
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Render the error as an envelope."""
        return ApiResponse.custom(self.data, self.business_code, self.message)

    @classmethod
    def bad_request(cls, message: str, data: Any = None) -> "BusinessError":
        return cls(ResponseCode.BAD_REQUEST, message, data)

    @classmethod
    def unauthorized(cls, message: str = "Unauthorized", data: Any = None) -> "BusinessError":
        return cls(ResponseCode.UNAUTHORIZED, message, data)

    @classmethod
    def forbidden(cls, message: str = "Access denied", data: Any = None) -> "BusinessError":
        return cls(ResponseCode.FORBIDDEN, message, data)

    @classmethod
    def not_found(cls, message: str = "Resource not found", data: Any = None) -> "BusinessError":
        return cls(ResponseCode.NOT_FOUND, message, data)

    @classmethod
    def error(cls, message: str = "Server error", data: Any = None) -> "BusinessError":
        return cls(ResponseCode.BUSINESS_ERROR, message, data)

    @classmethod
    def custom(cls, code: int, message: str, data: Any = None) -> "BusinessError":
        return cls(code, message, data)
