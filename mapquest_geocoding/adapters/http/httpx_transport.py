"""httpx transport adapter: implements HttpTransport."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from mapquest_geocoding.application.ports.http_transport import HttpTransport
from mapquest_geocoding.domain.exceptions import TransportError

logger = logging.getLogger(__name__)


class HttpxTransport(HttpTransport):
    """Blocking transport over a reusable ``httpx.Client``.

    Timeouts and TLS are configured on the client. Pass ``client`` to reuse
    an existing one (its lifetime then stays with the caller).
    """

    def __init__(self, timeout: float = 10.0, client: httpx.Client | None = None):
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout)

    def get(self, url: str, params: Mapping[str, str]) -> bytes:
        try:
            response = self._client.get(url, params=dict(params))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.debug("GET %s returned HTTP %d", e.request.url.path, status)
            raise TransportError(f"GET {e.request.url.path} returned HTTP {status}", status_code=status) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("GET %s failed", url, exc_info=True)
            raise TransportError(f"GET {url} failed: {e.__class__.__name__}: {e}") from e
        return response.content

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
