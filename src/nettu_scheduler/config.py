"""Client configuration shared by every sub-client of a bundle."""

from dataclasses import dataclass, field

import httpx

from nettu_scheduler.session import HttpSession

DEFAULT_BASE_URL = "http://localhost:5000/api/v1"


@dataclass(frozen=True)
class ClientConfig:
    """Where and how requests are sent.

    The config owns one :class:`HttpSession`, so every bundle built from it
    shares a single connection pool. Close it with :meth:`aclose` (or close
    any bundle built from it) when done.

    Attributes:
        base_url: Prefix for every request path. Joined verbatim, so
            ``"https://host/api/v1"`` pairs with paths like ``"/user"``.
        transport: Optional httpx transport (for example a
            :class:`~nettu_scheduler.transport.retry.RetryTransport` or an
            ``httpx.MockTransport`` in tests). ``None`` uses httpx's default.
            It is closed only when the session is closed.
        timeout: Request timeout in seconds. ``None`` disables timeouts.
    """

    base_url: str
    transport: httpx.AsyncBaseTransport | None = None
    timeout: float | None = None
    _session: HttpSession = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_session", HttpSession(self.transport, self.timeout))

    @property
    def session(self) -> HttpSession:
        return self._session

    async def aclose(self) -> None:
        await self._session.aclose()
