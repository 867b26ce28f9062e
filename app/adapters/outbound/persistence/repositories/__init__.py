# app/adapters/outbound/persistence/repositories/__init__.py (async version)

"""
Repository module.

Exports the repository classes and the shared instances used by the
use cases.
"""

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.repositories.admin_repository import AsyncAdminCRUD, admin_repository
from app.adapters.outbound.persistence.repositories.client_repository import AsyncClientCRUD, client_repository

__all__ = [
    # Classes
    "AsyncCRUDBase",
    "AsyncAdminCRUD",
    "AsyncClientCRUD",

    # Instances
    "admin_repository",
    "client_repository",
]
