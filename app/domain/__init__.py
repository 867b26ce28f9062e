# app/domain/__init__.py

"""
Domain components of the application.

Re-exports the exception taxonomy so callers can import it from one place.
"""

from app.domain.exceptions import (
    DomainException,               # Base of every application error
    InvalidInputException,
    InvalidCredentialsException,
    InvalidTokenException,
    ResourceNotFoundException,
    DatabaseOperationException,
)

__all__ = [
    "DomainException",
    "InvalidInputException",
    "InvalidCredentialsException",
    "InvalidTokenException",
    "ResourceNotFoundException",
    "DatabaseOperationException",
]
