from abc import ABC, abstractmethod


class ClientInterface(ABC):
    """Base interface class for implementing client connections.

    This abstract class defines the required methods that any client implementation
    must provide for establishing and managing connections to a content service.
    """

    @abstractmethod
    async def load(self):
        """Prepare the client for use."""
        pass

    @abstractmethod
    async def close(self):
        """Release any resources held by the client."""
        pass
