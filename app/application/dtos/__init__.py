# app/application/dtos/__init__.py

from app.application.dtos.base_dto import CustomBaseModel, validate_payload
from app.application.dtos.admin_dto import AdminRegister, AdminLogin, TokenOutput
from app.application.dtos.client_dto import ClientRegister, ClientOutput, MessageOutput

__all__ = [
    "CustomBaseModel",
    "validate_payload",
    "AdminRegister",
    "AdminLogin",
    "TokenOutput",
    "ClientRegister",
    "ClientOutput",
    "MessageOutput",
]
