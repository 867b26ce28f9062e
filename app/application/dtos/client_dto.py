# app/application/dtos/client_dto.py

"""
Schemas for client records.
"""

from typing import ClassVar

from pydantic import ConfigDict, EmailStr, Field, constr, field_validator

from app.application.dtos.base_dto import CustomBaseModel

# Range of the store's INTEGER columns
MIN_STORE_INT = -(2 ** 31)
MAX_STORE_INT = 2 ** 31 - 1


class ClientRegister(CustomBaseModel):
    """
    Schema for creating a client.

    Only the wire keys ``fullName``, ``email`` and ``age`` are read; any
    other key, including ``full_name``, is ignored.
    """
    error_message: ClassVar[str] = "Invalid input data"

    full_name: constr(min_length=1) = Field(..., alias="fullName", description="Client's full name.")
    email: EmailStr = Field(..., description="Contact email.")
    age: int = Field(..., ge=MIN_STORE_INT, le=MAX_STORE_INT, description="Age in whole years.")

    @field_validator("age", mode="before")
    def reject_boolean_age(cls, v):
        # bool is an int subclass; true/false is not an age
        if isinstance(v, bool):
            raise ValueError("age must be an integer")
        return v


class ClientOutput(CustomBaseModel):
    """Client row as stored, keyed by column name."""
    id: int = Field(..., description="Identifier assigned by the store.")
    full_name: str
    email: str
    age: int

    model_config = ConfigDict(from_attributes=True)


class MessageOutput(CustomBaseModel):
    """Plain confirmation message."""
    message: str
