# app/domain/models/admin_domain_model.py

from dataclasses import dataclass


@dataclass
class Admin:
    """Domain model for an administrator account."""
    id: int
    full_name: str
    email: str  # Always stored lowercased
    password: str  # bcrypt hash, never the plain text
