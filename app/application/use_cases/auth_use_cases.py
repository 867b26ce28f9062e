# app/application/use_cases/auth_use_cases.py (async version)

"""
Service for administrator authentication.

This module implements registration and login. Both end by signing a
bearer token; neither keeps any session state.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from app.adapters.outbound.persistence.repositories.admin_repository import admin_repository
from app.adapters.outbound.security.auth_admin_manager import AdminAuthManager
from app.application.dtos.admin_dto import AdminRegister, AdminLogin, TokenOutput
from app.application.ports.inbound import IAuthUseCase
from app.domain.exceptions import InvalidCredentialsException
from app.domain.models.token_claims import AdminClaims, ClientSessionClaims

logger = logging.getLogger(__name__)


class AsyncAuthService(IAuthUseCase):
    """
    Service for administrator authentication.
    """

    def __init__(self, db_session: AsyncSession):
        """
        Initialize the service with a database session.

        Args:
            db_session: Active SQLAlchemy session
        """
        self.db = db_session

    async def register_admin(self, admin_input: AdminRegister) -> TokenOutput:
        """
        Register a new administrator and sign a token for it.

        Args:
            admin_input: Validated registration data

        Returns:
            Token carrying AdminClaims (full_name, email, id)

        Raises:
            DatabaseOperationException: If the insert fails, e.g. a duplicate email
        """
        admin = await admin_repository.create_with_password(
            self.db,
            full_name=admin_input.full_name,
            email=admin_input.email,
            password=admin_input.password,
        )
        logger.info(f"Admin registered: {admin.id}")

        token = await AdminAuthManager.create_token(
            AdminClaims(id=admin.id, email=admin.email, full_name=admin.full_name)
        )
        return TokenOutput(token=token)

    async def login_admin(self, admin_input: AdminLogin) -> TokenOutput:
        """
        Authenticate an administrator by email and password.

        Unknown email and wrong password fail the same way, so the response
        does not reveal which emails are registered.

        Raises:
            InvalidCredentialsException: If the credentials do not match
            DatabaseOperationException: If the lookup fails
        """
        admin = await admin_repository.get_by_email(self.db, email=admin_input.email)
        if admin is None:
            logger.warning("Login attempt with unknown email")
            raise InvalidCredentialsException()

        if not await AdminAuthManager.verify_password(admin_input.password, admin.password):
            logger.warning(f"Login attempt with wrong password for admin {admin.id}")
            raise InvalidCredentialsException()

        token = await AdminAuthManager.create_token(
            ClientSessionClaims(id=admin.id, email=admin.email)
        )
        logger.info(f"Admin logged in: {admin.id}")
        return TokenOutput(token=token)
