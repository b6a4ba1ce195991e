"""FastAPI utility functions.

This module provides error handlers and response helpers shared by the
routes of the API server.
"""

from fastapi import status
from fastapi.responses import JSONResponse

from directus_pages.common.error_codes import SERVER_ERRORS
from directus_pages.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

# Paths to exclude from request logging (health checks)
EXCLUDED_LOG_PATHS: frozenset[str] = frozenset(
    {
        "/server/health",
        "/server/ready",
    }
)

# Sent with pages that must never be served from a cache
NO_STORE_RESPONSE_HEADERS = {"Cache-Control": "no-store"}


def error_response(message: str) -> JSONResponse:
    """A 500 response carrying only ``message`` under ``error``."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": message},
    )


def internal_server_error_handler(_, exc: Exception) -> JSONResponse:
    """Handle internal server errors in FastAPI applications.

    The exception is logged; the client only receives a generic message.

    Args:
        _ (Request): The FastAPI request object (unused).
        exc (Exception): The exception that triggered the error handler.

    Returns:
        JSONResponse: ``{"error": "An internal error has occurred."}`` with status 500.
    """
    logger.error(f"{SERVER_ERRORS['INTERNAL_ERROR']}: {exc}")
    return error_response("An internal error has occurred.")
