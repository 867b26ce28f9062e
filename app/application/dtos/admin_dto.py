# app/application/dtos/admin_dto.py

"""
Schemas for administrator data.

Defines the request schemas for registration and login and the token
returned by both.
"""

from typing import Any, ClassVar

from pydantic import ConfigDict, EmailStr, Field, constr, field_validator

from app.application.dtos.base_dto import CustomBaseModel


def _normalize_email(value: Any) -> Any:
    """Trim and lowercase an email before its format is checked."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


class AdminRegister(CustomBaseModel):
    """
    Schema for registering an administrator.

    ``repeatPassword`` must be present but is not compared with
    ``password``.
    """
    model_config = ConfigDict(extra="forbid")

    error_message: ClassVar[str] = "All fields are required"

    full_name: constr(strip_whitespace=True, min_length=1) = Field(
        ..., description="Administrator's full name."
    )
    email: EmailStr = Field(
        ..., description="Login email. Trimmed and lowercased before it is stored."
    )
    password: constr(min_length=1) = Field(..., description="Plain text password.")
    repeat_password: constr(min_length=1) = Field(
        ..., alias="repeatPassword", description="Password confirmation."
    )

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class AdminLogin(CustomBaseModel):
    """Schema for administrator login."""
    model_config = ConfigDict(extra="forbid")

    error_message: ClassVar[str] = "All fields are required"

    email: EmailStr = Field(..., description="Login email, matched case-insensitively.")
    password: constr(min_length=1) = Field(..., description="Plain text password.")

    @field_validator("email", mode="before")
    def normalize_email(cls, v):
        return _normalize_email(v)


class TokenOutput(CustomBaseModel):
    """Signed bearer token returned by register and login."""
    token: str = Field(..., description="JWT to send as 'Authorization: Bearer <token>'.")
