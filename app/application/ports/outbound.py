# app/application/ports/outbound.py

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from app.domain.models.admin_domain_model import Admin
from app.domain.models.client_domain_model import Client


class IAdminRepository(ABC):
    """Credential Store interface."""

    @abstractmethod
    async def get_by_email(self, db: Any, email: str) -> Optional[Admin]:
        """Get administrator by email."""
        pass

    @abstractmethod
    async def create_with_password(self, db: Any, *, full_name: str, email: str, password: str) -> Admin:
        """Create administrator with hashed password."""
        pass


class IClientRepository(ABC):
    """Client Registry interface."""

    @abstractmethod
    async def list_all(self, db: Any) -> List[Client]:
        """List every client."""
        pass

    @abstractmethod
    async def get_by_id(self, db: Any, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    async def create_client(self, db: Any, *, full_name: str, email: str, age: int) -> Client:
        """Insert a client and return the stored row."""
        pass

    @abstractmethod
    async def delete_by_id(self, db: Any, client_id: int) -> bool:
        """Delete a client; False when it does not exist."""
        pass
