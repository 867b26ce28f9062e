# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

Logs one line per request and one per response. Headers and bodies are
never logged, so bearer tokens and passwords stay out of the logs.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from app.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Middleware for request logging.
    """

    async def dispatch(self, request: Request, call_next):
        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {request.method} {request.url.path}")
        else:
            logger.info(
                f"Request: {request.method} {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )

        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        # Set by require_token on protected routes
        claims = getattr(request.state, "claims", None)
        caller = f"admin {claims.id}" if claims is not None else "anonymous"

        if settings.ENVIRONMENT == "production":
            logger.info(f"Response: {response.status_code} for {request.method} {request.url.path}")
        else:
            logger.info(
                f"Response: {response.status_code} for {request.method} {request.url.path} | "
                f"Caller: {caller} | Time: {process_time:.4f}s"
            )

        return response
