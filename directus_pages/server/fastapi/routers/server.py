"""Router for health and readiness probes."""

from fastapi import APIRouter, Request, Response, status

from directus_pages import __version__
from directus_pages.constants import APPLICATION_NAME
from directus_pages.server.fastapi.models import HealthResponse, ReadyResponse

router = APIRouter(
    prefix="/server",
    tags=["server"],
    responses={404: {"description": "Not found"}},
)


@router.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    """Report the application and how many static pages it serves."""
    server = request.app.state.server
    return HealthResponse(
        status="ok",
        app_name=APPLICATION_NAME,
        version=__version__,
        directus_url=server.client.settings.url,
        static_pages=len(server.static_pages),
    )


@router.get("/ready", response_model=ReadyResponse)
async def ready(request: Request, response: Response) -> ReadyResponse:
    """Ready once Directus answers its ping endpoint, 503 otherwise."""
    reachable = await request.app.state.server.client.ping()
    if not reachable:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadyResponse(status="ok" if reachable else "unavailable", directus=reachable)


def get_server_router() -> APIRouter:
    """Get the health check router.

    Returns:
        APIRouter: FastAPI router containing health check endpoints.
    """
    return router
