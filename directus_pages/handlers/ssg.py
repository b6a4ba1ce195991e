"""Detail pages rendered once, at build time.

The set of pages is enumerated from Directus when the site is built and
every page is rendered then. Requests are answered from the pre-rendered
store, so content stays as it was at build time until the next build.
"""

import asyncio
import os
from typing import Dict, List, Optional, Union

from directus_pages.clients.directus import DirectusClient
from directus_pages.common.error_codes import BUILD_ERRORS, StaticBuildError
from directus_pages.dto.content import (
    ContentKind,
    ContentRecord,
    SelectionSection,
    SSGPageData,
)
from directus_pages.handlers import HandlerInterface
from directus_pages.observability.logger_adaptor import get_logger
from directus_pages.templating import render_template

logger = get_logger(__name__)

SSG_NOT_FOUND = "SSG Page not found"

EXPORT_FILE_NAME = "index.html"


def render_ssg_not_found() -> str:
    return render_template("not_found.html", variant="ssg", message=SSG_NOT_FOUND)


class StaticPageStore:
    """Pre-rendered pages keyed by identifier.

    Written by a build, read by the server afterwards.
    """

    def __init__(self, pages: Optional[Dict[str, str]] = None):
        self.pages: Dict[str, str] = dict(pages or {})

    def __contains__(self, page_id: str) -> bool:
        return page_id in self.pages

    def __len__(self) -> int:
        return len(self.pages)

    @property
    def ids(self) -> List[str]:
        return list(self.pages)

    def get(self, page_id: str) -> Optional[str]:
        return self.pages.get(page_id)

    def export(self, export_path: str) -> List[str]:
        """Write each page to ``{export_path}/ssg_page/{id}/index.html``."""
        written = []
        for page_id, html in self.pages.items():
            page_dir = os.path.join(export_path, ContentKind.SSG_PAGE.value, page_id)
            os.makedirs(page_dir, exist_ok=True)
            file_path = os.path.join(page_dir, EXPORT_FILE_NAME)
            with open(file_path, "w", encoding="utf-8") as file:
                file.write(html)
            written.append(file_path)
        logger.info(f"Exported {len(written)} static pages to {export_path}")
        return written

    @classmethod
    def load(cls, export_path: str) -> "StaticPageStore":
        """Read back the pages a previous :meth:`export` wrote."""
        root = os.path.join(export_path, ContentKind.SSG_PAGE.value)
        pages: Dict[str, str] = {}
        if not os.path.isdir(root):
            return cls(pages)

        for page_id in sorted(os.listdir(root)):
            file_path = os.path.join(root, page_id, EXPORT_FILE_NAME)
            if not os.path.isfile(file_path):
                continue
            with open(file_path, "r", encoding="utf-8") as file:
                pages[page_id] = file.read()
        return cls(pages)


class SSGPageHandler(HandlerInterface):
    """Enumerates, fetches and renders the build-time detail pages."""

    kind = ContentKind.SSG_PAGE

    async def generate_static_params(self) -> List[Dict[str, str]]:
        """One ``{"id": "<id>"}`` entry per page in the listing, in listing order."""
        items = await self.client.list_items(self.kind.value)
        return [{"id": str(item["id"])} for item in items]

    async def load(self, page_id: Union[int, str]) -> SSGPageData:
        page, sections = await asyncio.gather(
            self.client.get_item(self.kind.value, page_id),
            self.client.list_children(self.kind.section_collection, page_id),
        )
        return SSGPageData(
            page=ContentRecord.from_directus(self.kind, page) if page else None,
            sections=[SelectionSection(**section) for section in sections],
        )

    def render(self, data: SSGPageData) -> str:
        if data.page is None:
            return render_ssg_not_found()
        return render_template("ssg_page.html", page=data.page, sections=data.sections)

    async def render_page(self, page_id: Union[int, str]) -> str:
        return self.render(await self.load(page_id))

    async def build(self) -> StaticPageStore:
        """Render every enumerated page.

        Raises:
            StaticBuildError: If enumeration or any page fails; a partial
                site is never produced.
        """
        try:
            params = await self.generate_static_params()
        except Exception as e:
            raise StaticBuildError(
                BUILD_ERRORS["ENUMERATION_ERROR"], f"Could not list {self.kind.value}: {e}"
            ) from e

        page_ids = [param["id"] for param in params]
        try:
            rendered = await asyncio.gather(
                *(self.render_page(page_id) for page_id in page_ids)
            )
        except Exception as e:
            raise StaticBuildError(
                BUILD_ERRORS["RENDER_ERROR"], f"Could not render {self.kind.value}: {e}"
            ) from e

        logger.info(f"Built {len(page_ids)} static {self.kind.value} pages")
        return StaticPageStore(dict(zip(page_ids, rendered)))
