# app/adapters/outbound/persistence/repositories/client_repository.py (async version)

"""
Repository for client operations.

This module implements the Client Registry on top of AsyncCRUDBase,
implementing the IClientRepository interface.
"""

from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Client
from app.application.ports.outbound import IClientRepository
from app.domain.models.client_domain_model import Client as DomainClient
from app.domain.exceptions import DatabaseOperationException


class AsyncClientCRUD(AsyncCRUDBase[Client], IClientRepository):
    """
    Async implementation of CRUD repository for the Client entity.
    """

    async def list_all(self, db: AsyncSession) -> List[DomainClient]:
        """Return every client record, unpaginated."""
        return [self.to_domain(client) for client in await self.get_all(db)]

    async def get_by_id(self, db: AsyncSession, client_id: int) -> Optional[DomainClient]:
        """Find a client by its store-assigned ID."""
        client = await self.get(db, client_id)
        return self.to_domain(client) if client else None

    async def create_client(
            self, db: AsyncSession, *, full_name: str, email: str, age: int
    ) -> DomainClient:
        """
        Insert a client, then read the row back by its generated ID.

        The insert and the read are separate statements; a concurrent
        delete in between leaves nothing to read back.

        Raises:
            DatabaseOperationException: If the insert fails or the row is gone
        """
        created = await self.create(
            db,
            obj_in={"full_name": full_name, "email": email, "age": age},
        )

        client = await self.get(db, created.id)
        if client is None:
            self.logger.error(f"Client {created.id} vanished right after insert")
            raise DatabaseOperationException(detail="Error reading back created client")
        return self.to_domain(client)

    async def delete_by_id(self, db: AsyncSession, client_id: int) -> bool:
        """
        Delete a client by ID.

        Returns:
            False if no client has this ID, True once it is deleted
        """
        client = await self.get(db, client_id)
        if client is None:
            return False

        await self.remove(db, db_obj=client)
        return True

    def to_domain(self, db_model: Client) -> DomainClient:
        """Convert database model to domain model."""
        return DomainClient(
            id=db_model.id,
            full_name=db_model.full_name,
            email=db_model.email,
            age=db_model.age,
        )


# Public instance to be used by use cases
client_repository = AsyncClientCRUD(Client)
