"""Uniform envelope around every API response."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

import httpx

from nettu_scheduler.errors.handler import raise_for_status

T = TypeVar("T")


def _parse_body(res: httpx.Response) -> Any:
    if not res.content:
        return None
    try:
        return res.json()
    except ValueError:
        # Not JSON (or not decodable); the raw response still has it
        return None


@dataclass(frozen=True)
class APIResponse(Generic[T]):
    """Status, decoded body and raw response of one request.

    ``data`` is None when the body was empty or not JSON, so a failed or
    bodyless response can be told apart from a falsy payload like ``[]``.
    Whether ``status`` means success is for the caller to decide; use
    :meth:`raise_for_status` to get exceptions instead.

    Attributes:
        data: Decoded JSON body, if any.
        status: HTTP status code, copied verbatim.
        res: The underlying httpx response.
    """

    data: T | None
    status: int
    res: httpx.Response

    @classmethod
    def from_response(cls, res: httpx.Response) -> "APIResponse[T]":
        return cls(data=_parse_body(res), status=res.status_code, res=res)

    def raise_for_status(self) -> "APIResponse[T]":
        """Raise an :class:`~nettu_scheduler.errors.APIError` unless 2xx.

        Returns the envelope itself so calls can be chained.
        """
        raise_for_status(self)
        return self
