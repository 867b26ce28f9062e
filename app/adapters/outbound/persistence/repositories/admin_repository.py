# app/adapters/outbound/persistence/repositories/admin_repository.py (async version)

"""
Repository for administrator operations.

This module implements the Credential Store: inserting administrators
with a hashed password and looking them up by email on login.
"""

from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.outbound.persistence.repositories.base_repository import AsyncCRUDBase
from app.adapters.outbound.persistence.models import Admin
from app.adapters.outbound.security.auth_admin_manager import AdminAuthManager
from app.application.ports.outbound import IAdminRepository
from app.domain.models.admin_domain_model import Admin as DomainAdmin
from app.domain.exceptions import DatabaseOperationException


class AsyncAdminCRUD(AsyncCRUDBase[Admin], IAdminRepository):
    """
    Async implementation of CRUD repository for the Admin entity.
    """

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[DomainAdmin]:
        """
        Find an administrator by email.

        Args:
            db: Async database session
            email: Lowercased email

        Returns:
            Administrator found or None if it doesn't exist

        Raises:
            DatabaseOperationException: In case of database error
        """
        try:
            query = select(Admin).where(Admin.email == email)
            result = await db.execute(query)
            admin = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching admin by email '{email}': {e}")
            raise DatabaseOperationException(
                detail="Error fetching admin by email",
                original_error=e
            )
        return self.to_domain(admin) if admin else None

    async def create_with_password(
            self, db: AsyncSession, *, full_name: str, email: str, password: str
    ) -> DomainAdmin:
        """
        Insert a new administrator, storing only the bcrypt hash.

        A duplicate email violates the unique constraint and surfaces as
        DatabaseOperationException like any other store failure.
        """
        password_hash = await AdminAuthManager.hash_password(password)
        admin = await self.create(
            db,
            obj_in={"full_name": full_name, "email": email, "password": password_hash},
        )
        return self.to_domain(admin)

    def to_domain(self, db_model: Admin) -> DomainAdmin:
        """Convert database model to domain model."""
        return DomainAdmin(
            id=db_model.id,
            full_name=db_model.full_name,
            email=db_model.email,
            password=db_model.password,
        )


# Public instance to be used by use cases
admin_repository = AsyncAdminCRUD(Admin)
