# app/domain/models/client_domain_model.py

from dataclasses import dataclass


@dataclass
class Client:
    """Domain model for a client record."""
    id: int
    full_name: str
    email: str
    age: int
