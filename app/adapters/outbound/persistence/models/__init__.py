# app/adapters/outbound/persistence/models/__init__.py

"""
ORM models.

Importing this package registers every table on ``Base.metadata``.
"""

from app.adapters.outbound.persistence.models.base_model import Base
from app.adapters.outbound.persistence.models.admin_model import Admin
from app.adapters.outbound.persistence.models.client_model import Client

__all__ = [
    "Base",
    "Admin",
    "Client",
]
