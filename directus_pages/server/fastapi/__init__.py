from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

# Import with full paths to avoid naming conflicts
from fastapi import status
from fastapi.applications import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.routing import APIRouter
from fastapi.staticfiles import StaticFiles
from uvicorn import Config, Server

from directus_pages.clients.directus import DirectusClient
from directus_pages.common.error_codes import DirectusClientError
from directus_pages.config import DirectusSettings, get_settings
from directus_pages.constants import (
    APP_HOST,
    APP_PORT,
    APPLICATION_NAME,
    SSG_BUILD_ON_STARTUP,
    SSG_EXPORT_PATH,
    STATIC_ASSETS_PATH,
)
from directus_pages.dto.content import ContentKind
from directus_pages.handlers.listing import (
    ListingHandler,
    ListViewState,
    fetch_listing,
    listing_error_message,
)
from directus_pages.handlers.ssg import SSGPageHandler, StaticPageStore, render_ssg_not_found
from directus_pages.handlers.ssr import SSRPageHandler
from directus_pages.observability.logger_adaptor import get_logger
from directus_pages.server import ServerInterface
from directus_pages.server.fastapi.middleware.logmiddleware import LogMiddleware
from directus_pages.server.fastapi.models import ErrorResponse, ListingResponse
from directus_pages.server.fastapi.routers.server import get_server_router
from directus_pages.server.fastapi.utils import (
    NO_STORE_RESPONSE_HEADERS,
    error_response,
    internal_server_error_handler,
)

logger = get_logger(__name__)

# Listing endpoints exposed under /api, one per page type
LISTING_ROUTES = {
    ContentKind.PAGE: "/pages",
    ContentKind.SSG_PAGE: "/ssg_pages",
    ContentKind.SSR_PAGE: "/ssr_pages",
}


class APIServer(ServerInterface):
    """A FastAPI-based implementation of the ServerInterface.

    Serves the listing page, the JSON listing endpoints and both kinds of
    detail page. Build-time pages are rendered during start-up (or read
    from a previous export) and then served unchanged.

    Attributes:
        app (FastAPI): The main FastAPI application instance.
        client (DirectusClient): Client used for every Directus request.
        static_pages (StaticPageStore): Pre-rendered build-time pages.
        api_router (APIRouter): Router for the JSON listing endpoints.
        pages_router (APIRouter): Router for the HTML pages.

    Args:
        client (Optional[DirectusClient]): Client to use; built from ``settings`` when omitted.
        settings (Optional[DirectusSettings]): Directus settings; read from the environment when omitted.
        static_pages (Optional[StaticPageStore]): Pages built beforehand; skips the start-up build.
        build_static_on_startup (bool): Build pages at start-up instead of reading ``ssg_export_path``.
        ssg_export_path (str): Directory holding exported build-time pages.
    """

    app: FastAPI
    client: DirectusClient
    static_pages: StaticPageStore
    api_router: APIRouter
    pages_router: APIRouter

    def __init__(
        self,
        client: Optional[DirectusClient] = None,
        settings: Optional[DirectusSettings] = None,
        static_pages: Optional[StaticPageStore] = None,
        build_static_on_startup: bool = SSG_BUILD_ON_STARTUP,
        ssg_export_path: str = SSG_EXPORT_PATH,
    ):
        self.client = client or DirectusClient(settings or get_settings())
        self.static_pages = static_pages or StaticPageStore()
        self._static_pages_ready = static_pages is not None
        self.build_static_on_startup = build_static_on_startup
        self.ssg_export_path = ssg_export_path

        self.app = FastAPI(title=APPLICATION_NAME, lifespan=self.lifespan)
        self.app.state.server = self

        self.api_router = APIRouter()
        self.pages_router = APIRouter()

        self.app.add_exception_handler(Exception, internal_server_error_handler)
        self.app.add_middleware(LogMiddleware)

        self.register_routers()
        self.app.mount(
            "/static", StaticFiles(directory=STATIC_ASSETS_PATH), name="static"
        )

    @asynccontextmanager
    async def lifespan(self, app: FastAPI) -> AsyncIterator[None]:
        await self.client.load()
        await self.prepare_static_pages()
        yield
        await self.client.close()

    async def prepare_static_pages(self) -> None:
        """Fill the build-time page store, once.

        Raises:
            StaticBuildError: If the build fails; the server must not start
                with an incomplete site.
        """
        if self._static_pages_ready:
            return

        if self.build_static_on_startup:
            await self.build_static_pages()
        else:
            self.static_pages = StaticPageStore.load(self.ssg_export_path)
            logger.info(
                f"Loaded {len(self.static_pages)} static pages from {self.ssg_export_path}"
            )
        self._static_pages_ready = True

    async def build_static_pages(self) -> StaticPageStore:
        self.static_pages = await SSGPageHandler(self.client).build()
        self._static_pages_ready = True
        return self.static_pages

    def register_routers(self):
        """Register all routers with the FastAPI application.

        - Server router (/server)
        - API router (/api)
        - Pages router (/)
        """
        self.register_routes()

        self.app.include_router(get_server_router())
        self.app.include_router(self.api_router, prefix="/api")
        self.app.include_router(self.pages_router)

    def register_routes(self):
        """
        Method to register the routes for the FastAPI application
        """
        for kind, path in LISTING_ROUTES.items():
            self.api_router.add_api_route(
                path,
                self.listing_endpoint(kind),
                methods=["GET"],
                response_model=ListingResponse,
                responses={500: {"model": ErrorResponse}},
            )

        self.pages_router.add_api_route(
            "/",
            self.list_view,
            methods=["GET"],
            response_class=HTMLResponse,
        )
        self.pages_router.add_api_route(
            "/ssg_page/{page_id}",
            self.ssg_page,
            methods=["GET"],
            response_class=HTMLResponse,
        )
        self.pages_router.add_api_route(
            "/ssr_page/{page_id}",
            self.ssr_page,
            methods=["GET"],
            response_class=HTMLResponse,
        )

    def listing_endpoint(self, kind: ContentKind):
        """Build the handler proxying ``kind``'s listing from Directus."""

        async def get_listing() -> JSONResponse:
            try:
                items = await fetch_listing(self.client, kind)
            except DirectusClientError as e:
                logger.error(f"API Error: {e}")
                return error_response(listing_error_message(kind))
            return JSONResponse(content=items)

        get_listing.__name__ = f"list_{kind.value}s"
        return get_listing

    async def list_view(self) -> HTMLResponse:
        handler = ListingHandler(self.client)
        state = await handler.load()
        status_code = (
            status.HTTP_200_OK
            if state is ListViewState.READY
            else status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        return HTMLResponse(content=handler.render(), status_code=status_code)

    async def ssg_page(self, page_id: str) -> HTMLResponse:
        """Serve a page from the build-time store; unknown ids are not found."""
        html = self.static_pages.get(page_id)
        if html is None:
            return HTMLResponse(
                content=render_ssg_not_found(), status_code=status.HTTP_404_NOT_FOUND
            )
        return HTMLResponse(content=html)

    async def ssr_page(self, page_id: str) -> HTMLResponse:
        handler = SSRPageHandler(self.client)
        data = await handler.load(page_id)
        return HTMLResponse(
            content=handler.render(data),
            status_code=status.HTTP_200_OK if data else status.HTTP_404_NOT_FOUND,
            headers=NO_STORE_RESPONSE_HEADERS,
        )

    async def start(
        self,
        host: str = APP_HOST,
        port: int = APP_PORT,
    ) -> None:
        """Start the FastAPI application server.

        Args:
            host (str): Host address to bind to.
            port (int): Port to listen on.
        """
        logger.info(f"Starting application on {host}:{port}")
        server = Server(
            Config(
                app=self.app,
                host=host,
                port=port,
            )
        )
        await server.serve()
