from typing import Any, Dict, Optional

import httpx

from directus_pages.clients import ClientInterface
from directus_pages.common.error_codes import CLIENT_ERRORS, DirectusClientError
from directus_pages.observability.logger_adaptor import get_logger

logger = get_logger(__name__)


class BaseClient(ClientInterface):
    """
    Base client for HTTP content services.

    Each request opens its own ``httpx.AsyncClient`` so that concurrent
    requests never share connection state. Timeouts are left at the httpx
    defaults and no retries are attempted: a request either succeeds or
    raises :class:`DirectusClientError`.

    Attributes:
        headers (Dict[str, str]): Headers sent with every request.
        transport (Optional[httpx.AsyncBaseTransport]): Transport override, httpx default when None.
    """

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.headers = dict(headers or {})
        self.transport = transport

    async def load(self, **kwargs: Any) -> None:
        """
        Initialize the client.

        Raises:
            NotImplementedError: If the subclass does not implement this method.
        """
        raise NotImplementedError("load method is not implemented")

    async def close(self) -> None:
        """Nothing to release: connections live only for one request."""
        return None

    async def execute_http_get_request(
        self,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Perform an HTTP GET request and return the successful response.

        Args:
            url (str): The URL to make the GET request to
            headers (Optional[Dict[str, str]]): Extra headers, merged over the client headers
            params (Optional[Dict[str, Any]]): Query parameters to include in the request

        Returns:
            httpx.Response: The response, guaranteed to carry a 2xx status.

        Raises:
            DirectusClientError: On a non-2xx status or a transport failure.

        Example:
            >>> response = await client.execute_http_get_request(
            ...     url="http://localhost:8055/items/ssg_page",
            ...     params={"filter[page_id][_eq]": "7"},
            ... )
        """
        request_headers = {**self.headers, **(headers or {})}
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.get(url, headers=request_headers, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Network error (url={url}): {str(e)}")
            raise DirectusClientError(
                CLIENT_ERRORS["TRANSPORT_ERROR"], f"GET {url} failed: {str(e)}"
            ) from e

        if not response.is_success:
            status_phrase = (
                httpx.codes.get_reason_phrase(response.status_code) or "Unknown Status"
            )
            logger.error(
                f"Request failed with status {response.status_code} {status_phrase} (url={url}): {response.text}"
            )
            raise DirectusClientError(
                CLIENT_ERRORS["UPSTREAM_STATUS_ERROR"],
                f"Directus API error: {response.status_code}",
                status_code=response.status_code,
            )

        return response
