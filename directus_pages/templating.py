"""Jinja2 environment shared by the server and the static build."""

from functools import lru_cache
from typing import Any

from fastapi.templating import Jinja2Templates

from directus_pages.common.utils import format_short_date
from directus_pages.constants import TEMPLATES_PATH


@lru_cache
def get_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=TEMPLATES_PATH)
    templates.env.filters["short_date"] = format_short_date
    return templates


def render_template(name: str, **context: Any) -> str:
    """Render a template to a string, outside of any request."""
    return get_templates().get_template(name).render(**context)
