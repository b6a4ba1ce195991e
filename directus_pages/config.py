"""Directus connection settings using Pydantic."""

from functools import lru_cache
from typing import Any, Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from directus_pages.constants import DEFAULT_DIRECTUS_URL


class DirectusSettings(BaseSettings):
    """Connection settings for the Directus content service.

    Environment variables take precedence over defaults.

    Environment Variables:
        DIRECTUS_URL: Base URL of the Directus instance
        DIRECTUS_TOKEN: Static bearer token sent with every request
    """

    model_config = SettingsConfigDict(
        env_prefix="DIRECTUS_",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    url: str = DEFAULT_DIRECTUS_URL
    token: Optional[str] = None

    def items_url(self, collection: str, item_id: Optional[str] = None) -> str:
        """Build the items endpoint for a collection, or for one item in it."""
        base = f"{self.url.rstrip('/')}/items/{collection}"
        if item_id is None:
            return base
        return f"{base}/{item_id}"

    def auth_headers(self) -> Dict[str, str]:
        # An unset token is sent as-is; Directus rejects it.
        return {"Authorization": f"Bearer {self.token}"}

    @classmethod
    def get_settings(cls, **kwargs: Any) -> "DirectusSettings":
        """Create settings with optional overrides."""
        return cls(**kwargs)


@lru_cache
def get_settings() -> DirectusSettings:
    """Settings read once from the environment for the whole process."""
    return DirectusSettings()
