"""Port interface for sending HTTP GET requests."""

from abc import ABC, abstractmethod
from collections.abc import Mapping


class HttpTransport(ABC):
    @abstractmethod
    def get(self, url: str, params: Mapping[str, str]) -> bytes:
        """Send a GET request to ``url`` with query ``params`` and return the body.

        Raises TransportError if the request cannot be completed or the
        service answers with a non-2xx status.
        """
        ...
