"""Application error taxonomy.

Every failure that reaches a client is one of four kinds (bad request, not
found, unauthorized, internal), each carrying a stable numeric code so that
clients can branch on the reason rather than on the message text.
"""

from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    USER_ALREADY_EXISTS = 1001
    USER_NOT_FOUND = 1002
    INVALID_PASSWORD = 1003
    VALIDATION_FAILED = 1004
    INTERNAL_EXCEPTION = 1005
    UNAUTHORIZED = 1006
    PRODUCT_NOT_FOUND = 1007
    ADDRESS_NOT_FOUND = 1008
    ADDRESS_NOT_FOR_USER = 1009
    ORDER_NOT_FOUND = 1010
    ORDER_STATUS_LOCKED = 1011
    CART_ITEM_NOT_FOUND = 1012


class OrderlyError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500

    def __init__(self, message: str, error_code: ErrorCode, errors: Any = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.errors = errors

    def to_dict(self) -> dict:
        return {
            "message": self.message,
            "error_code": int(self.error_code),
            "errors": self.errors,
        }


class BadRequestError(OrderlyError):
    status_code = 400


class NotFoundError(OrderlyError):
    status_code = 404


class UnauthorizedError(OrderlyError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized", error_code: ErrorCode = ErrorCode.UNAUTHORIZED, errors=None):
        super().__init__(message, error_code, errors)


class InternalError(OrderlyError):
    """Wraps an unexpected failure. The cause is kept for logging only."""

    def __init__(self, message: str = "Internal server error", cause: Exception | None = None):
        super().__init__(message, ErrorCode.INTERNAL_EXCEPTION)
        self.cause = cause
