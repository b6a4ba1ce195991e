from abc import ABC, abstractmethod
from typing import Any

from directus_pages.clients.directus import DirectusClient


class HandlerInterface(ABC):
    """
    Abstract base class for page handlers

    A handler owns one page type: it fetches what the page needs from
    Directus and renders it to HTML.
    """

    def __init__(self, client: DirectusClient):
        self.client = client

    @abstractmethod
    async def load(self, *args: Any, **kwargs: Any) -> Any:
        """
        Fetch the data the page renders
        To be implemented by the subclass
        """
        raise NotImplementedError("load method not implemented")
