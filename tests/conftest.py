"""Global test configuration and fixtures."""

import json
from typing import Any, Callable, Dict, Optional, Tuple
from unittest.mock import MagicMock

import httpx
import pytest

from directus_pages.clients.directus import DirectusClient
from directus_pages.config import DirectusSettings

DIRECTUS_URL = "http://directus.test"
DIRECTUS_TOKEN = "test-token"

# (path, filter value or None) -> (status code, JSON body)
Routes = Dict[Tuple[str, Optional[str]], Tuple[int, Any]]


@pytest.fixture
def settings() -> DirectusSettings:
    return DirectusSettings(url=DIRECTUS_URL, token=DIRECTUS_TOKEN)


def make_response(status_code: int = 200, body: Any = None) -> MagicMock:
    """A stand-in for ``httpx.Response`` as returned by a mocked AsyncClient."""
    response = MagicMock()
    response.status_code = status_code
    response.is_success = 200 <= status_code < 300
    response.json.return_value = body
    response.text = json.dumps(body)
    return response


def directus_transport(
    routes: Routes, requests: Optional[list] = None
) -> httpx.MockTransport:
    """An httpx transport that answers like Directus for the given routes.

    Unknown routes get a 404 with a Directus-style error body. Every request
    is appended to ``requests`` when a list is given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if requests is not None:
            requests.append(request)
        key = (request.url.path, request.url.params.get("filter[page_id][_eq]"))
        if key not in routes:
            return httpx.Response(404, json={"errors": [{"message": "Route not found"}]})
        status_code, body = routes[key]
        return httpx.Response(status_code, json=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def make_client(settings) -> Callable[..., DirectusClient]:
    """Build a DirectusClient wired to an in-memory Directus."""

    def _make(routes: Routes, requests: Optional[list] = None) -> DirectusClient:
        return DirectusClient(settings, transport=directus_transport(routes, requests))

    return _make


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    return make_response
