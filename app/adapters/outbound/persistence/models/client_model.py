# app/adapters/outbound/persistence/models/client_model.py

"""
Client record model.

Clients are plain records managed by authenticated callers: created,
listed and deleted, never updated.
"""

from sqlalchemy import Column, Integer, String
from app.adapters.outbound.persistence.models.base_model import Base


class Client(Base):
    """
    Client record.

    Attributes:
        id: Identifier assigned by the store
        full_name: Client's full name
        email: Contact email (not unique)
        age: Age in years
    """
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, email={self.email})>"
