# app/adapters/inbound/api/deps.py (async version)

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for authentication and database access.
"""

import logging
from typing import Any, Optional
from fastapi import Request, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.adapters.outbound.persistence.database import get_db
from app.adapters.outbound.security.auth_admin_manager import AdminAuthManager
from app.domain.exceptions import InvalidTokenException
from app.domain.models.token_claims import TokenClaims

# Configure logger
logger = logging.getLogger(__name__)

# Bearer scheme; a missing header is rejected by require_token, not by FastAPI
bearer_scheme = HTTPBearer(auto_error=False)

########################################################################
# Database Session Management
########################################################################

# Alias kept so endpoints read the same as the rest of the adapters
get_session = get_db


########################################################################
# Bearer Token Authentication
########################################################################

async def require_token(
        request: Request,
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
) -> TokenClaims:
    """
    Gate for protected routes: pass with the decoded claims or reject with 401.

    Any valid token passes, whichever claim set it carries. On success
    the claims are also attached to ``request.state.claims``.

    Raises:
        InvalidTokenException: If the header is missing, is not a Bearer
            credential, or the token fails verification
    """
    if credentials is None:
        logger.warning(f"Missing bearer token on {request.method} {request.url.path}")
        raise InvalidTokenException(reason="Missing bearer token")

    try:
        claims = await AdminAuthManager.verify_token(credentials.credentials)
    except InvalidTokenException as e:
        logger.warning(f"Rejected token on {request.method} {request.url.path}: {e.reason}")
        raise

    request.state.claims = claims
    return claims


########################################################################
# Request Body
########################################################################

async def json_body(request: Request) -> Any:
    """
    Decoded JSON body, or None when the body is empty or not valid JSON.

    Routes pass the result to validate_payload, so an unparsable body is
    rejected with the same message as any other invalid payload.
    """
    try:
        return await request.json()
    except ValueError:
        logger.info(f"Unparsable JSON body on {request.method} {request.url.path}")
        return None


def json_request_body(schema: type) -> dict:
    """OpenAPI ``requestBody`` for a route that reads its body through json_body."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema()}},
        }
    }
