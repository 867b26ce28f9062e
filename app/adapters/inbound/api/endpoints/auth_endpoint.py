# app/adapters/inbound/api/endpoints/auth_endpoint.py (async version)

import logging
from typing import Any
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.use_cases.auth_use_cases import AsyncAuthService
from app.application.dtos.base_dto import validate_payload
from app.application.dtos.admin_dto import AdminRegister, AdminLogin, TokenOutput
from app.adapters.inbound.api.deps import get_session, json_body, json_request_body

logger = logging.getLogger(__name__)
router = APIRouter()

ERROR_EXAMPLE = {"application/json": {"example": {"error": "All fields are required"}}}


@router.post(
    "/register",
    response_model=TokenOutput,
    status_code=status.HTTP_201_CREATED,
    openapi_extra=json_request_body(AdminRegister),
    summary="Register Admin - Creates an administrator",
    description="""
    Creates an administrator and returns a signed bearer token.

    Body: `full_name`, `email`, `password`, `repeatPassword`, all required.
    The email is trimmed and lowercased before it is stored.
    """,
    responses={
        400: {"description": "Missing or invalid field", "content": ERROR_EXAMPLE},
        500: {"description": "Store failure, including an email already registered"},
    },
)
async def register_admin(
        payload: Any = Depends(json_body),
        db: AsyncSession = Depends(get_session),
):
    admin_input = validate_payload(AdminRegister, payload)
    service = AsyncAuthService(db)
    return await service.register_admin(admin_input)


@router.post(
    "/login",
    response_model=TokenOutput,
    summary="Login Admin - Generates a bearer token",
    openapi_extra=json_request_body(AdminLogin),
    description=(
            "Authenticates an administrator (email/password) and returns a signed token. "
            "An unknown email and a wrong password get the same 400 response."
    ),
    responses={
        400: {
            "description": "Invalid body or credentials did not match",
            "content": {"application/json": {"example": {"error": "Email or password did not match"}}},
        },
    },
)
async def login_admin(
        payload: Any = Depends(json_body),
        db: AsyncSession = Depends(get_session),
):
    admin_input = validate_payload(AdminLogin, payload)
    service = AsyncAuthService(db)
    return await service.login_admin(admin_input)
