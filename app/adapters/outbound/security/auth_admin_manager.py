# app/adapters/outbound/security/auth_admin_manager.py (async version)

import logging

from jose import jwt, JWTError
from passlib.context import CryptContext
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from app.adapters.configuration.config import settings
from app.domain.exceptions import InvalidTokenException
from app.domain.models.token_claims import TokenClaims, token_claims_adapter

SECRET_KEY = settings.SECRET_KEY
ALGORITHM = settings.ALGORITHM

logger = logging.getLogger(__name__)


class AdminAuthManager:
    """
    Password hashing and JWT handling for administrators.

    bcrypt runs in the threadpool so a hash never blocks the event loop.
    Tokens carry no ``exp`` claim and are never persisted: a token stays
    valid for as long as the signing secret does not change.
    """

    crypt_context = CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.BCRYPT_ROUNDS,
    )

    @classmethod
    async def hash_password(cls, password: str) -> str:
        """Return the salted bcrypt hash of a plain text password."""
        return await run_in_threadpool(cls.crypt_context.hash, password)

    @classmethod
    async def verify_password(cls, plain_password: str, hashed_password: str) -> bool:
        """Verify if the plain text password matches the stored hash."""
        try:
            return await run_in_threadpool(cls.crypt_context.verify, plain_password, hashed_password)
        except (ValueError, TypeError):
            # Stored value is not a hash passlib recognises
            logger.warning("Stored password hash could not be identified")
            return False

    @classmethod
    async def create_token(cls, claims: TokenClaims) -> str:
        """
        Sign a claim set into a JWT.

        - claims: AdminClaims on registration, ClientSessionClaims on login.
        """
        payload = claims.model_dump()
        return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)

    @classmethod
    async def verify_token(cls, token: str) -> TokenClaims:
        """
        Verify a JWT signature and parse its payload back into claims.

        Raises InvalidTokenException for a bad signature, an unexpected
        algorithm or a payload that matches no known claim set.
        """
        try:
            payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        except JWTError as e:
            raise InvalidTokenException(reason=f"Invalid token signature: {e}")

        try:
            return token_claims_adapter.validate_python(payload)
        except ValidationError:
            raise InvalidTokenException(reason="Unrecognised token claims")
