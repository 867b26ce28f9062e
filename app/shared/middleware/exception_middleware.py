# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for exceptions that no handler claimed.

Domain exceptions are rendered by the handlers in
app.adapters.inbound.api.error_handlers; whatever still escapes a route
ends here and becomes a generic 500.
"""

import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_ERROR_BODY = {"error": "Internal server error"}


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Catches unhandled exceptions, logs them and answers 500.
    Internal detail is never sent to the caller.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        try:
            return await call_next(request)

        except SQLAlchemyError as exc:
            if settings.ENVIRONMENT == "production":
                logger.error(
                    f"Database error: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                logger.error(
                    f"Database error: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY,
            )

        except Exception as exc:
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=INTERNAL_ERROR_BODY,
            )
