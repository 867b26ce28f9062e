# app/application/dtos/base_dto.py

"""
Base class for the request and response DTOs.

Request schemas declare the message returned to the caller when they
reject a payload; ``validate_payload`` is the single place that turns a
pydantic ValidationError into an InvalidInputException.
"""

import logging
from typing import Any, ClassVar, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.domain.exceptions import InvalidInputException

logger = logging.getLogger(__name__)

SchemaType = TypeVar("SchemaType", bound="CustomBaseModel")


class CustomBaseModel(BaseModel):
    """
    Base model for every DTO of the application.

    Attributes:
        error_message: Message sent back when a payload fails this schema
    """

    error_message: ClassVar[str] = "Invalid input data"


def validate_payload(schema: Type[SchemaType], payload: Any) -> SchemaType:
    """
    Validate a decoded JSON body against a request schema.

    Args:
        schema: Request DTO class
        payload: Decoded body; anything other than an object is rejected

    Returns:
        Validated (and normalised) instance of ``schema``

    Raises:
        InvalidInputException: If any field fails its constraint
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        fields = {
            ".".join(str(loc) for loc in error["loc"]) or "body": error["msg"]
            for error in e.errors()
        }
        logger.info(f"{schema.__name__} rejected: {fields}")
        raise InvalidInputException(detail=schema.error_message, fields=fields)
