# app/domain/models/token_claims.py

"""
Claim sets carried inside bearer tokens.

Tokens are stateless: nothing here is persisted. Each claim set is tagged
with ``type`` so a decoded payload is always parsed back into the variant
it was issued as.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class AdminClaims(BaseModel):
    """Claims issued when an administrator registers."""
    model_config = ConfigDict(frozen=True)

    type: Literal["admin"] = "admin"
    id: int
    email: str
    full_name: str


class ClientSessionClaims(BaseModel):
    """Claims issued on a successful login."""
    model_config = ConfigDict(frozen=True)

    type: Literal["session"] = "session"
    id: int
    email: str


TokenClaims = Annotated[Union[AdminClaims, ClientSessionClaims], Field(discriminator="type")]

token_claims_adapter = TypeAdapter(TokenClaims)
