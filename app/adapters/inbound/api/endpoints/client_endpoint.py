# app/adapters/inbound/api/endpoints/client_endpoint.py

"""
Endpoints for client records.

Every route here sits behind require_token, applied on the router.
"""

import logging
from typing import Any, List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.inbound.api.deps import get_session, json_body, json_request_body, require_token
from app.application.dtos.base_dto import validate_payload
from app.application.dtos.client_dto import ClientRegister, ClientOutput, MessageOutput
from app.application.use_cases.client_use_cases import AsyncClientService

# Configure logging
logger = logging.getLogger(__name__)

UNAUTHORIZED_RESPONSE = {
    401: {
        "description": "Missing or invalid bearer token",
        "content": {"application/json": {"example": {"error": "Unauthorized"}}},
    }
}

router = APIRouter(
    tags=["Clients"],
    dependencies=[Depends(require_token)],
    responses=UNAUTHORIZED_RESPONSE,
)


@router.get(
    "/",
    response_model=MessageOutput,
    summary="Check token",
    tags=["Auth"],
)
async def check_token():
    """Confirms that the bearer token was accepted."""
    return MessageOutput(message="Authorized")


@router.get(
    "/clients",
    response_model=List[ClientOutput],
    summary="List clients",
)
async def list_clients(db: AsyncSession = Depends(get_session)):
    """Returns every client record."""
    service = AsyncClientService(db)
    return await service.list_clients()


@router.post(
    "/clients",
    response_model=ClientOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create client",
    openapi_extra=json_request_body(ClientRegister),
    description="Body: `fullName`, `email`, `age` (integer). Returns the stored row.",
    responses={
        400: {
            "description": "Invalid body",
            "content": {"application/json": {"example": {"error": "Invalid input data"}}},
        },
    },
)
async def create_client(
        payload: Any = Depends(json_body),
        db: AsyncSession = Depends(get_session),
):
    client_input = validate_payload(ClientRegister, payload)
    service = AsyncClientService(db)
    return await service.create_client(client_input)


@router.delete(
    "/clients/{client_id}",
    response_model=MessageOutput,
    summary="Delete client",
    responses={
        404: {
            "description": "No client with this ID",
            "content": {"application/json": {"example": {"error": "Client not found"}}},
        },
    },
)
async def delete_client(client_id: str, db: AsyncSession = Depends(get_session)):
    """Deletes the client with the given ID."""
    service = AsyncClientService(db)
    return await service.delete_client(client_id)
