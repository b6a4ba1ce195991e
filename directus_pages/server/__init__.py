from abc import ABC, abstractmethod


class ServerInterface(ABC):
    """Abstract base class for the HTTP server that serves the pages."""

    @abstractmethod
    async def start(self, *args, **kwargs) -> None:
        """Start serving requests."""
        pass
