"""Long-lived HTTP session shared by every client built on one config."""

import logging

import httpx

logger = logging.getLogger(__name__)


class HttpSession:
    """Lazily built ``httpx.AsyncClient`` reused across requests.

    All sub-clients of a bundle, and every bundle built from the same
    :class:`~nettu_scheduler.config.ClientConfig`, send through the same
    client, so connections are pooled and concurrent calls never tear
    down each other's transport. Only :meth:`aclose` closes it; the next
    request after that builds a fresh client.

    Args:
        transport: Optional httpx transport. Closed together with the session.
        timeout: Request timeout in seconds. ``None`` disables timeouts.
    """

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None, timeout: float | None = None):
        self._transport = transport
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> httpx.AsyncClient:
        # No await between check and assignment, so one client per event loop turn
        if self._client is None:
            self._client = httpx.AsyncClient(
                transport=self._transport,
                timeout=self._timeout,
                follow_redirects=True,
            )
            logger.debug("Opened nettu HTTP session")
        return self._client

    async def aclose(self) -> None:
        """Close the pooled connections and the transport, if open."""
        client, self._client = self._client, None
        if client is not None:
            await client.aclose()
            logger.debug("Closed nettu HTTP session")
