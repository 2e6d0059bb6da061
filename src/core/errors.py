"""
Custom exceptions and error handling for Budget Backpack.

Defines application-specific exceptions with error codes for consistent
error handling across Lambda functions and client communication.

Usage:
    from core.errors import NotFoundError, ErrorCode

    raise NotFoundError("Trip not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Authentication errors
    AUTH_FAILED = "AUTH_FAILED"
    INVALID_TOKEN = "INVALID_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"

    # Account errors
    USER_EXISTS = "USER_EXISTS"
    USERNAME_TAKEN = "USERNAME_TAKEN"

    # Trip errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    INVALID_ID = "INVALID_ID"

    # Upstream provider errors
    UPSTREAM_ERROR = "UPSTREAM_ERROR"
    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"

    # System errors
    STORAGE_ERROR = "STORAGE_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.AUTH_FAILED: "Authentication failed. Please sign in again.",
    ErrorCode.INVALID_TOKEN: "Your session has expired. Please sign in again.",
    ErrorCode.INVALID_CREDENTIALS: "Invalid credentials",
    ErrorCode.NOT_AUTHORIZED: "User not authorized for this trip",
    ErrorCode.USER_EXISTS: "User already exists with this email",
    ErrorCode.USERNAME_TAKEN: "Username is already taken",
    ErrorCode.TRIP_NOT_FOUND: "Trip not found",
    ErrorCode.ITEM_NOT_FOUND: "Saved item not found",
    ErrorCode.INVALID_ID: "Invalid trip ID format",
    ErrorCode.UPSTREAM_ERROR: "The travel data provider returned an error. Please try again.",
    ErrorCode.UPSTREAM_UNAVAILABLE: "No response received from the travel data provider.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.STORAGE_ERROR: "Unable to reach the trip store. Please try again.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}

HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.AUTH_FAILED: 401,
    ErrorCode.INVALID_TOKEN: 401,
    ErrorCode.INVALID_CREDENTIALS: 400,
    ErrorCode.NOT_AUTHORIZED: 403,
    ErrorCode.USER_EXISTS: 400,
    ErrorCode.USERNAME_TAKEN: 400,
    ErrorCode.TRIP_NOT_FOUND: 404,
    ErrorCode.ITEM_NOT_FOUND: 404,
    ErrorCode.INVALID_ID: 400,
    ErrorCode.UPSTREAM_ERROR: 502,
    ErrorCode.UPSTREAM_UNAVAILABLE: 502,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.STORAGE_ERROR: 500,
    ErrorCode.INTERNAL_ERROR: 500,
}


class BackpackError(Exception):
    """Base exception for all Budget Backpack errors."""

    # Subclasses whose messages are written for the caller set this to True.
    public = False

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        if self.public and self.message:
            return self.message
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])

    @property
    def status_code(self) -> int:
        return HTTP_STATUS.get(self.code, 500)


class AuthenticationError(BackpackError):
    """Authentication failed: missing, expired or invalid credentials."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.AUTH_FAILED):
        super().__init__(message, code)


class AuthorizationError(BackpackError):
    """The caller is authenticated but does not own the resource."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.NOT_AUTHORIZED):
        super().__init__(message, code)


class NotFoundError(BackpackError):
    public = True

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRIP_NOT_FOUND):
        super().__init__(message, code)


class ConflictError(BackpackError):
    """A unique account attribute is already in use."""

    public = True


class ValidationError(BackpackError):
    """Input validation failed before any upstream call or store write."""

    public = True

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        errors: list[str] | None = None,
    ):
        super().__init__(message, code)
        self.errors = errors or [message]


class UpstreamError(BackpackError):
    """A provider answered with a non-2xx status."""

    public = True

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        details: Any = None,
        code: ErrorCode = ErrorCode.UPSTREAM_ERROR,
    ):
        super().__init__(message, code)
        self.upstream_status = upstream_status
        self.details = details

    @property
    def status_code(self) -> int:
        if self.upstream_status and self.upstream_status >= 400:
            return self.upstream_status
        return super().status_code


class GatewayError(BackpackError):
    """No response was received from a provider."""

    public = True

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UPSTREAM_UNAVAILABLE):
        super().__init__(message, code)
