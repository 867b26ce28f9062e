# app/adapters/inbound/api/error_handlers.py

"""
Global exception handlers.

Every error leaves the API as ``{"error": "<message>"}``. Store failures
are logged with their original error and answered with a generic message.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.domain.exceptions import DomainException, DatabaseOperationException

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainException)
    async def domain_exception_handler(request: Request, exc: DomainException):
        if isinstance(exc, DatabaseOperationException):
            logger.error(
                f"Store failure: {exc.operation} | "
                f"Cause: {exc.original_error!r} | "
                f"Path: {request.url.path}"
            )
        else:
            logger.info(
                f"Domain exception: {exc.detail} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
        return error_response(exc.status_code, exc.detail, headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Framework-level parameter errors; request bodies go through validate_payload
        logger.info(f"Invalid request parameters on {request.url.path}: {exc.errors()}")
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid input data")

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))
