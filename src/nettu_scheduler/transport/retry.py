"""Retry transport for rate limits and flaky gateways.

| Outcome | Retried for |
|---------|-------------|
| 429 Too Many Requests | every method, honouring ``Retry-After`` |
| 502 / 503 / 504 | idempotent methods only |
| transport error (connect, read, timeout) | idempotent methods only |

When retries run out the last response is returned, or the last transport
error re-raised, so callers still see the normal two outcomes: a response
with some status, or an exception.
"""

import asyncio
import logging
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime

import httpx

logger = logging.getLogger(__name__)


class RetryTransport(httpx.AsyncBaseTransport):
    """Wrap another async transport with capped exponential backoff.

    Args:
        wrapped_transport: The transport that actually sends requests.
        max_retries: Retries after the first attempt (default: 3).
        backoff_factor: Base delay in seconds; attempt ``n`` waits
            ``backoff_factor * 2 ** (n - 1)`` (default: 0.5).
        max_backoff: Upper bound for any single delay (default: 30).
        retry_status_codes: 5xx codes retried for idempotent methods.
    """

    # Per RFC 7231
    IDEMPOTENT_METHODS: frozenset[str] = frozenset(["HEAD", "GET", "PUT", "DELETE", "OPTIONS", "TRACE"])

    DEFAULT_RETRY_STATUS_CODES: frozenset[int] = frozenset([502, 503, 504])

    def __init__(
        self,
        *,
        wrapped_transport: httpx.AsyncBaseTransport,
        max_retries: int = 3,
        backoff_factor: float = 0.5,
        max_backoff: float = 30.0,
        retry_status_codes: frozenset[int] | None = None,
    ) -> None:
        self._wrapped_transport = wrapped_transport
        self.max_retries = max_retries
        self.backoff_factor = backoff_factor
        self.max_backoff = max_backoff
        self.retry_status_codes = retry_status_codes or self.DEFAULT_RETRY_STATUS_CODES

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        retries = 0

        while True:
            try:
                response = await self._wrapped_transport.handle_async_request(request)
            except httpx.TransportError as e:
                if retries >= self.max_retries or request.method not in self.IDEMPOTENT_METHODS:
                    raise

                retries += 1
                delay = self._calculate_backoff_delay(retries)
                logger.warning(
                    f"Request {request.method} {request.url} failed with {e!r}, "
                    f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            delay = self._retry_delay(request, response, retries)
            if delay is None:
                return response

            await response.aclose()
            retries += 1
            logger.warning(
                f"Request {request.method} {request.url} failed with {response.status_code}, "
                f"retrying in {delay}s (attempt {retries}/{self.max_retries})"
            )
            await asyncio.sleep(delay)

    def _retry_delay(self, request: httpx.Request, response: httpx.Response, retries: int) -> float | None:
        """Delay before the next attempt, or None to return ``response`` as is."""
        if retries >= self.max_retries:
            return None

        if response.status_code == 429:
            delay = self._parse_retry_after(response)
            return delay if delay is not None else self._calculate_backoff_delay(retries + 1)

        if response.status_code in self.retry_status_codes and request.method in self.IDEMPOTENT_METHODS:
            return self._calculate_backoff_delay(retries + 1)

        return None

    def _parse_retry_after(self, response: httpx.Response) -> float | None:
        """Parse ``Retry-After`` as delay-seconds or an HTTP-date, capped at max_backoff."""
        retry_after = response.headers.get("Retry-After")
        if not retry_after:
            return None

        try:
            delay = float(int(retry_after))
        except ValueError:
            try:
                retry_date = parsedate_to_datetime(retry_after)
            except (ValueError, TypeError):
                return None
            delay = (retry_date - datetime.now(UTC)).total_seconds()

        # Negative values and clock skew
        if delay < 0:
            return None
        return min(delay, self.max_backoff)

    def _calculate_backoff_delay(self, retry_number: int) -> float:
        delay = self.backoff_factor * (2 ** (retry_number - 1))
        return min(delay, self.max_backoff)
