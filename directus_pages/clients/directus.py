from typing import Any, Dict, List, Optional, Union

import httpx

from directus_pages.clients.base import BaseClient
from directus_pages.common.error_codes import CLIENT_ERRORS, DirectusClientError
from directus_pages.config import DirectusSettings
from directus_pages.observability.logger_adaptor import get_logger

logger = get_logger(__name__)

# Sent when a response must come from Directus itself, never from a cache
NO_STORE_HEADERS = {"Cache-Control": "no-store", "Pragma": "no-cache"}


class DirectusClient(BaseClient):
    """Read-only client for the Directus items API.

    Every call carries ``Authorization: Bearer {token}`` and unwraps the
    ``{"data": ...}`` envelope Directus puts around every payload.

    Args:
        settings (DirectusSettings): Base URL and token of the Directus instance.
        transport (Optional[httpx.AsyncBaseTransport]): Transport override, mainly for tests.
    """

    def __init__(
        self,
        settings: DirectusSettings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings
        super().__init__(headers=settings.auth_headers(), transport=transport)

    async def load(self, **kwargs: Any) -> None:
        logger.info(f"Using Directus at {self.settings.url}")

    async def list_items(
        self, collection: str, no_store: bool = False
    ) -> List[Dict[str, Any]]:
        """``GET /items/{collection}``: every item of a collection."""
        response = await self.execute_http_get_request(
            self.settings.items_url(collection), headers=self._cache_headers(no_store)
        )
        return self._unwrap_list(response)

    async def get_item(
        self, collection: str, item_id: Union[int, str], no_store: bool = False
    ) -> Optional[Dict[str, Any]]:
        """``GET /items/{collection}/{id}``: one item, or ``None`` when Directus returns null."""
        response = await self.execute_http_get_request(
            self.settings.items_url(collection, str(item_id)),
            headers=self._cache_headers(no_store),
        )
        data = self._unwrap(response)
        if data is not None and not isinstance(data, dict):
            raise DirectusClientError(
                CLIENT_ERRORS["RESPONSE_PARSE_ERROR"],
                f"Expected an object for {collection}/{item_id}",
            )
        return data

    async def list_children(
        self, collection: str, page_id: Union[int, str], no_store: bool = False
    ) -> List[Dict[str, Any]]:
        """``GET /items/{collection}?filter[page_id][_eq]={page_id}``."""
        response = await self.execute_http_get_request(
            self.settings.items_url(collection),
            headers=self._cache_headers(no_store),
            params={"filter[page_id][_eq]": str(page_id)},
        )
        return self._unwrap_list(response)

    async def ping(self) -> bool:
        """Check that Directus answers ``GET /server/ping``."""
        try:
            await self.execute_http_get_request(
                f"{self.settings.url.rstrip('/')}/server/ping"
            )
        except DirectusClientError:
            return False
        return True

    @staticmethod
    def _cache_headers(no_store: bool) -> Optional[Dict[str, str]]:
        return dict(NO_STORE_HEADERS) if no_store else None

    @staticmethod
    def _unwrap(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError as e:
            raise DirectusClientError(
                CLIENT_ERRORS["RESPONSE_PARSE_ERROR"], f"Invalid JSON: {str(e)}"
            ) from e
        if not isinstance(body, dict):
            raise DirectusClientError(
                CLIENT_ERRORS["RESPONSE_PARSE_ERROR"], "Response envelope is not an object"
            )
        return body.get("data")

    def _unwrap_list(self, response: httpx.Response) -> List[Dict[str, Any]]:
        data = self._unwrap(response)
        if not isinstance(data, list):
            raise DirectusClientError(
                CLIENT_ERRORS["RESPONSE_PARSE_ERROR"], "Expected a list under 'data'"
            )
        return data
