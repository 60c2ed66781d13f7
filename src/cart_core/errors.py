"""
Custom exceptions and error handling for the cart service.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from cart_core.errors import NotFoundError, ErrorCode

    raise NotFoundError("Cart abc not found", code=ErrorCode.CART_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Request errors
    INVALID_PARAM = "INVALID_PARAM"

    # Cart errors
    CART_NOT_FOUND = "CART_NOT_FOUND"
    INVALID_CART = "INVALID_CART"

    # System errors
    STORAGE_FAILED = "STORAGE_FAILED"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_PARAM: "Your request is missing required information. Please check and try again.",
    ErrorCode.CART_NOT_FOUND: "We couldn't find your cart. It may have expired.",
    ErrorCode.INVALID_CART: "Your cart could not be read. Please try again.",
    ErrorCode.STORAGE_FAILED: "Your cart is temporarily unavailable. Please try again later.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class CartServiceError(Exception):
    """Base exception for all cart service errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class InvalidParameterError(CartServiceError):
    """A required request parameter is missing or malformed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_PARAM):
        super().__init__(message, code)


class NotFoundError(CartServiceError):
    """The requested cart does not exist or the token does not match."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CART_NOT_FOUND):
        super().__init__(message, code)


class InvalidCartError(CartServiceError):
    """The cart value is absent or structurally unusable."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_CART):
        super().__init__(message, code)


class CartStorageError(CartServiceError):
    """Reading or writing the carts table failed."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.STORAGE_FAILED):
        super().__init__(message, code)
