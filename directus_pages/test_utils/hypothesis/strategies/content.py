import string
from datetime import datetime
from typing import Any, Dict, List, Optional

from hypothesis import strategies as st

from directus_pages.dto.content import ContentKind

timestamps = st.datetimes(
    min_value=datetime(2000, 1, 1),
    max_value=datetime(2099, 12, 31),
).map(lambda dt: dt.strftime("%Y-%m-%dT%H:%M:%S.000Z"))


@st.composite
def content_record_payload(
    draw, kind: ContentKind, include_sections: Optional[bool] = None
) -> Dict[str, Any]:
    """Generate a raw Directus item for ``kind``, with or without its section field."""
    payload: Dict[str, Any] = {
        "id": draw(st.integers(min_value=1, max_value=10**6)),
        "title": draw(st.text(alphabet=string.ascii_letters + " ", max_size=40)),
        "date_created": draw(timestamps),
        "date_updated": draw(st.one_of(st.none(), timestamps)),
    }
    if kind is ContentKind.PAGE:
        payload["status"] = draw(st.sampled_from(["published", "draft", "archived"]))

    if include_sections is None:
        include_sections = draw(st.booleans())
    if include_sections:
        payload[kind.section_field] = draw(
            st.lists(st.integers(min_value=1, max_value=10**6), max_size=20)
        )
    return payload


@st.composite
def listing_payload(draw, kind: ContentKind) -> List[Dict[str, Any]]:
    """Generate a listing of items with distinct ids."""
    items = draw(st.lists(content_record_payload(kind), max_size=10))
    seen = set()
    unique = []
    for item in items:
        if item["id"] not in seen:
            seen.add(item["id"])
            unique.append(item)
    return unique


@st.composite
def editor_block(draw) -> Dict[str, Any]:
    block: Dict[str, Any] = {
        "id": draw(st.text(alphabet="abcdefghij0123456789", min_size=10, max_size=10)),
        "type": draw(st.sampled_from(["paragraph", "header", "list", "quote"])),
        "data": {},
    }
    if draw(st.booleans()):
        block["data"]["text"] = draw(st.text(max_size=80))
    return block


@st.composite
def rich_text_section_payload(draw, page_id: int) -> Dict[str, Any]:
    return {
        "id": draw(st.integers(min_value=1, max_value=10**6)),
        "page_id": page_id,
        "date_created": draw(timestamps),
        "text_editor": {
            "time": draw(st.integers(min_value=0, max_value=2**41)),
            "version": "2.28.2",
            "blocks": draw(st.lists(editor_block(), max_size=5)),
        },
    }
