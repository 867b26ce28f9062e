# app/application/use_cases/client_use_cases.py (async version)

"""
Service for client management.

This module implements listing, creating and deleting client records.
"""

import logging
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.client_repository import client_repository
from app.application.dtos.client_dto import (
    ClientRegister, ClientOutput, MessageOutput, MIN_STORE_INT, MAX_STORE_INT,
)
from app.application.ports.inbound import IClientUseCase
from app.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)

# Range of the store's integer primary key
MIN_CLIENT_ID = MIN_STORE_INT
MAX_CLIENT_ID = MAX_STORE_INT


def parse_client_id(raw_id: str) -> Optional[int]:
    """Return the path ID as an int, or None if it cannot name a row."""
    try:
        client_id = int(raw_id)
    except (TypeError, ValueError):
        return None
    if not MIN_CLIENT_ID <= client_id <= MAX_CLIENT_ID:
        return None
    return client_id


class AsyncClientService(IClientUseCase):
    """
    Service for client management.
    """

    def __init__(self, db_session: AsyncSession):
        self.db_session = db_session

    async def list_clients(self) -> List[ClientOutput]:
        """Return the full client collection, unfiltered."""
        clients = await client_repository.list_all(self.db_session)
        return [ClientOutput.model_validate(client) for client in clients]

    async def create_client(self, client_input: ClientRegister) -> ClientOutput:
        """
        Insert a client and return the row as read back from the store.

        Raises:
            DatabaseOperationException: In case of database error
        """
        client = await client_repository.create_client(
            self.db_session,
            full_name=client_input.full_name,
            email=client_input.email,
            age=client_input.age,
        )
        return ClientOutput.model_validate(client)

    async def delete_client(self, client_id: str) -> MessageOutput:
        """
        Delete a client by ID.

        An ID that is not an integer cannot match any row and is reported
        as not found.

        Raises:
            ResourceNotFoundException: If no client has this ID
            DatabaseOperationException: In case of database error
        """
        parsed_id = parse_client_id(client_id)
        if parsed_id is None or not await client_repository.delete_by_id(self.db_session, parsed_id):
            logger.warning(f"Client not found: ID {client_id}")
            raise ResourceNotFoundException(detail="Client not found", resource_id=client_id)

        logger.info(f"Client deleted: ID {parsed_id}")
        return MessageOutput(message="Client deleted successfully")
