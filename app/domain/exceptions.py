# app/domain/exceptions.py

"""
Application-specific exceptions.

Each exception carries the HTTP status code it maps to and a short
internal code. The message in ``detail`` is what the caller sees, so it
never contains driver or SQL details.
"""

from fastapi import status
from typing import Any, Optional


class DomainException(Exception):
    """
    Base exception for every error raised by the application.
    Rendered as ``{"error": detail}`` by the registered exception handlers.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    internal_code: str = "DOMAIN_ERROR"
    headers: Optional[dict] = None

    def __init__(self, detail: str, internal_code: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if internal_code:
            self.internal_code = internal_code


class InvalidInputException(DomainException):
    """Request payload failed schema validation."""

    internal_code = "INVALID_INPUT"

    def __init__(self, detail: str = "Invalid input data", fields: Optional[dict] = None):
        super().__init__(detail)
        self.fields = fields or {}


class InvalidCredentialsException(DomainException):
    """Email/password pair did not match a stored administrator."""

    internal_code = "INVALID_CREDENTIALS"

    def __init__(self, detail: str = "Email or password did not match"):
        super().__init__(detail)


class InvalidTokenException(DomainException):
    """Bearer token missing, malformed, tampered with or otherwise unusable."""

    status_code = status.HTTP_401_UNAUTHORIZED
    internal_code = "INVALID_TOKEN"
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, detail: str = "Unauthorized", reason: Optional[str] = None):
        super().__init__(detail)
        self.reason = reason


class ResourceNotFoundException(DomainException):
    """Resource not found."""

    status_code = status.HTTP_404_NOT_FOUND
    internal_code = "RESOURCE_NOT_FOUND"

    def __init__(self, detail: str = "Resource not found", resource_id: Any = None):
        super().__init__(detail)
        self.resource_id = resource_id


class DatabaseOperationException(DomainException):
    """
    Failure talking to the store.

    The original error is kept on the instance for server-side logging;
    the client only ever sees the generic message.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    internal_code = "DATABASE_OPERATION_ERROR"

    def __init__(self, detail: str = "Internal server error",
                 original_error: Optional[Exception] = None):
        super().__init__("Internal server error")
        self.operation = detail
        self.original_error = original_error
