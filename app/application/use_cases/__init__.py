# app/application/use_cases/__init__.py (async version)

"""
Application service module.

This package contains the application services that implement the business
logic, one per functional area.
"""

from app.application.use_cases.auth_use_cases import AsyncAuthService
from app.application.use_cases.client_use_cases import AsyncClientService

__all__ = [
    "AsyncAuthService",
    "AsyncClientService",
]
