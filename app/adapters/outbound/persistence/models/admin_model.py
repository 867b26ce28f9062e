# app/adapters/outbound/persistence/models/admin_model.py

"""
Administrator model.

Administrators are the only accounts able to log in. Rows are created on
registration and read on login; nothing updates or deletes them.
"""

from sqlalchemy import Column, Integer, String
from app.adapters.outbound.persistence.models.base_model import Base


class Admin(Base):
    """
    Administrator account.

    Attributes:
        id: Identifier assigned by the store
        full_name: Display name, trimmed on input
        email: Login email, lowercased on input and unique
        password: bcrypt hash of the password
    """
    __tablename__ = "admins"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<Admin(id={self.id}, email={self.email})>"
