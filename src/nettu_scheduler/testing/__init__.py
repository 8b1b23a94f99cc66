"""Testing helpers for code built on the Nettu client.

Example:
    ```python
    from nettu_scheduler import PartialCredentials, create_client
    from nettu_scheduler.testing import RecordingHandler, mock_config


    async def test_creates_user():
        handler = RecordingHandler(status_code=201, json={"user": {"id": "u1"}})
        client = create_client(mock_config(handler), PartialCredentials(api_key="k"))

        res = await client.user.create()

        assert res.data == {"user": {"id": "u1"}}
        assert handler.requests[0].url.path == "/api/v1/user"
    ```
"""

import json as jsonlib
from typing import Any

import httpx

from nettu_scheduler.config import ClientConfig

TEST_BASE_URL = "https://scheduler.test/api/v1"


class RecordingHandler:
    """``httpx.MockTransport`` handler that records requests.

    Returns the same canned response for every request, or raises
    ``error`` to simulate a transport failure.
    """

    def __init__(
        self,
        status_code: int = 200,
        json: Any = None,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        error: Exception | None = None,
    ):
        self.status_code = status_code
        self.json = json
        self.content = content
        self.headers = headers
        self.error = error
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.json is not None:
            return httpx.Response(self.status_code, json=self.json, headers=self.headers)
        return httpx.Response(self.status_code, content=self.content, headers=self.headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        """Decoded JSON body of the most recent request."""
        return jsonlib.loads(self.last_request.content)


def mock_config(handler: Any, base_url: str = TEST_BASE_URL) -> ClientConfig:
    """A :class:`ClientConfig` whose requests all go to ``handler``."""
    return ClientConfig(base_url=base_url, transport=httpx.MockTransport(handler))


__all__ = ["TEST_BASE_URL", "RecordingHandler", "mock_config"]
