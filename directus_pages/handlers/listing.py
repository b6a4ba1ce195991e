"""Listing endpoints and the page that shows every page type side by side."""

import asyncio
from enum import Enum
from typing import Any, Dict, List, Optional

from directus_pages.clients.directus import DirectusClient
from directus_pages.common.error_codes import DirectusClientError
from directus_pages.dto.content import ContentKind, ContentRecord
from directus_pages.handlers import HandlerInterface
from directus_pages.observability.logger_adaptor import get_logger
from directus_pages.templating import render_template

logger = get_logger(__name__)

# Grid order on the listing page
LISTED_KINDS = (ContentKind.PAGE, ContentKind.SSG_PAGE, ContentKind.SSR_PAGE)

LIST_VIEW_ERROR = "Failed to fetch pages"


def listing_error_message(kind: ContentKind) -> str:
    return f"Failed to fetch {kind.listing_name}"


async def fetch_listing(client: DirectusClient, kind: ContentKind) -> List[Dict[str, Any]]:
    """Every raw item of ``kind``'s collection, unwrapped from the envelope."""
    return await client.list_items(kind.value)


class ListViewState(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


class ListingHandler(HandlerInterface):
    """The listing page: three grids, one per page type.

    A handler instance renders one view. :meth:`load` runs once and moves
    the view from ``loading`` to either ``ready`` or ``error``; both are
    final. The three listings are fetched together and all of them must
    succeed, otherwise no grid is rendered.
    """

    def __init__(self, client: DirectusClient):
        super().__init__(client)
        self.state = ListViewState.LOADING
        self.error: Optional[str] = None
        self.records: Dict[ContentKind, List[ContentRecord]] = {
            kind: [] for kind in LISTED_KINDS
        }

    async def load(self) -> ListViewState:
        if self.state is not ListViewState.LOADING:
            return self.state

        try:
            listings = await asyncio.gather(
                *(fetch_listing(self.client, kind) for kind in LISTED_KINDS)
            )
            records = {
                kind: [ContentRecord.from_directus(kind, item) for item in items]
                for kind, items in zip(LISTED_KINDS, listings)
            }
        except (DirectusClientError, ValueError) as e:
            logger.error(f"Error loading page listings: {e}")
            self.error = LIST_VIEW_ERROR
            self.state = ListViewState.ERROR
            return self.state

        self.records = records
        self.state = ListViewState.READY
        return self.state

    def render(self) -> str:
        return render_template(
            "index.html",
            state=self.state.value,
            error=self.error,
            grids=[(kind, self.records[kind]) for kind in LISTED_KINDS],
        )
