"""Detail pages fetched from Directus on every request."""

import asyncio
from typing import Optional, Union

from directus_pages.common.error_codes import DirectusClientError
from directus_pages.dto.content import (
    ContentKind,
    ContentRecord,
    RichTextSection,
    SSRPageData,
)
from directus_pages.handlers import HandlerInterface
from directus_pages.observability.logger_adaptor import get_logger
from directus_pages.templating import render_template

logger = get_logger(__name__)

SSR_NOT_FOUND = "SSR Page not found"
NO_CONTENT = "No content"


def render_ssr_not_found() -> str:
    return render_template("not_found.html", variant="ssr", message=SSR_NOT_FOUND)


class SSRPageHandler(HandlerInterface):
    """Fetches and renders one per-request detail page.

    Both requests ask Directus to bypass caches. A missing page and a failed
    fetch both come back as ``None``, so the caller shows the same
    not-found block for either.
    """

    kind = ContentKind.SSR_PAGE

    async def load(self, page_id: Union[int, str]) -> Optional[SSRPageData]:
        try:
            page, sections = await asyncio.gather(
                self.client.get_item(self.kind.value, page_id, no_store=True),
                self.client.list_children(
                    self.kind.section_collection, page_id, no_store=True
                ),
            )
            if not page:
                return None
            return SSRPageData(
                page=ContentRecord.from_directus(self.kind, page),
                sections=[RichTextSection(**section) for section in sections],
            )
        except (DirectusClientError, ValueError) as e:
            logger.error(f"Error fetching SSR data for {page_id}: {e}")
            return None

    def render(self, data: Optional[SSRPageData]) -> str:
        if data is None:
            return render_ssr_not_found()
        return render_template(
            "ssr_page.html",
            page=data.page,
            sections=data.sections,
            no_content=NO_CONTENT,
        )

    async def render_page(self, page_id: Union[int, str]) -> str:
        return self.render(await self.load(page_id))
