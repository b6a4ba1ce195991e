"""
Error codes for directus-pages.

Error codes follow the format: Pages-{Component}-{HTTP_Code}-{Unique_ID}

Components:
- Client: Directus client errors
- Server: FastAPI server errors
- Build: Static page build errors
"""

from typing import Optional


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"Pages-{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Client Errors
CLIENT_ERRORS = {
    "UPSTREAM_STATUS_ERROR": ErrorCode(
        "Client", "502", "00", "Directus responded with a non-success status"
    ),
    "TRANSPORT_ERROR": ErrorCode(
        "Client", "503", "00", "Directus could not be reached"
    ),
    "RESPONSE_PARSE_ERROR": ErrorCode(
        "Client", "502", "01", "Directus response could not be parsed"
    ),
}

# Server Errors
SERVER_ERRORS = {
    "INTERNAL_ERROR": ErrorCode("Server", "500", "00", "Unhandled server error"),
}

# Static Build Errors
BUILD_ERRORS = {
    "ENUMERATION_ERROR": ErrorCode(
        "Build", "500", "00", "Static page identifiers could not be enumerated"
    ),
    "RENDER_ERROR": ErrorCode("Build", "500", "01", "Static page failed to render"),
}


class PagesError(Exception):
    """Base exception carrying an :class:`ErrorCode`."""

    def __init__(self, error_code: ErrorCode, message: Optional[str] = None):
        self.error_code = error_code
        self.message = message or error_code.description
        super().__init__(f"{error_code.code}: {self.message}")


class DirectusClientError(PagesError):
    """A Directus request failed or returned something unusable.

    ``status_code`` is set when Directus answered with a non-2xx status and
    is ``None`` for transport and parse failures.
    """

    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(error_code, message)


class StaticBuildError(PagesError):
    """The build-time rendering of static pages could not complete."""
