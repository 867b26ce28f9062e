# app/application/ports/inbound.py

from abc import ABC, abstractmethod
from typing import List

from app.application.dtos.admin_dto import AdminRegister, AdminLogin, TokenOutput
from app.application.dtos.client_dto import ClientRegister, ClientOutput, MessageOutput


class IAuthUseCase(ABC):
    """Interface for administrator authentication use cases."""

    @abstractmethod
    async def register_admin(self, admin_input: AdminRegister) -> TokenOutput:
        """Register an administrator and return a signed token."""
        pass

    @abstractmethod
    async def login_admin(self, admin_input: AdminLogin) -> TokenOutput:
        """Check credentials and return a signed token."""
        pass


class IClientUseCase(ABC):
    """Interface for client-related use cases."""

    @abstractmethod
    async def list_clients(self) -> List[ClientOutput]:
        """Return every client."""
        pass

    @abstractmethod
    async def create_client(self, client_input: ClientRegister) -> ClientOutput:
        """Create a client and return the stored row."""
        pass

    @abstractmethod
    async def delete_client(self, client_id: str) -> MessageOutput:
        """Delete a client by ID."""
        pass
