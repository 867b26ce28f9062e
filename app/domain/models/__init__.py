# app/domain/models/__init__.py

from app.domain.models.admin_domain_model import Admin
from app.domain.models.client_domain_model import Client
from app.domain.models.token_claims import (
    AdminClaims,
    ClientSessionClaims,
    TokenClaims,
    token_claims_adapter,
)

__all__ = [
    "Admin",
    "Client",
    "AdminClaims",
    "ClientSessionClaims",
    "TokenClaims",
    "token_claims_adapter",
]
