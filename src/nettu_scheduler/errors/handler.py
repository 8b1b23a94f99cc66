"""Opt-in conversion of error envelopes into exceptions."""

from typing import TYPE_CHECKING

from nettu_scheduler.errors.exceptions import (
    APIError,
    BadRequestError,
    ClientError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from nettu_scheduler.response import APIResponse

EXCEPTION_MAP: dict[int, type[APIError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    409: ConflictError,
    429: RateLimitError,
}


def error_message(response: "APIResponse") -> str:
    """Build a readable message for an error envelope.

    Prefers a ``message`` or ``error`` field of a JSON object body, then
    falls back to the start of the raw body text.
    """
    status_code = response.status
    data = response.data
    if isinstance(data, dict):
        for key in ("message", "error"):
            if isinstance(data.get(key), str) and data[key]:
                return f"HTTP {status_code}: {data[key]}"

    response_text = response.res.text[:200]
    return f"HTTP {status_code}: {response_text}" if response_text else f"HTTP {status_code}"


def raise_for_status(response: "APIResponse") -> None:
    """Raise the matching :class:`APIError` subclass for a non-2xx envelope.

    Args:
        response: Envelope returned by any client call.

    Raises:
        APIError subclass based on status code
    """
    status_code = response.status
    if 200 <= status_code < 300:
        return

    if status_code in EXCEPTION_MAP:
        exc_class = EXCEPTION_MAP[status_code]
    elif 400 <= status_code < 500:
        exc_class = ClientError
    elif 500 <= status_code < 600:
        exc_class = ServerError
    else:
        exc_class = APIError

    message = error_message(response)

    if exc_class is RateLimitError:
        retry_after = None
        raw_retry_after = response.res.headers.get("retry-after")
        if raw_retry_after is not None:
            try:
                retry_after = int(raw_retry_after)
            except ValueError:
                retry_after = None
        raise RateLimitError(
            message,
            retry_after=retry_after,
            status_code=status_code,
            response=response,
        )

    raise exc_class(message, status_code=status_code, response=response)
