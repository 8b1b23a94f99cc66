"""Base client shared by every Nettu resource client."""

import logging
from typing import Any

from nettu_scheduler.auth.credentials import Credentials
from nettu_scheduler.config import ClientConfig
from nettu_scheduler.response import APIResponse

logger = logging.getLogger(__name__)

_NO_BODY = object()


class BaseClient:
    """The one place that talks to the transport.

    Every call sends exactly one request to ``config.base_url + path`` with
    the credential headers attached and returns an :class:`APIResponse`,
    whatever the status code. Transport failures (DNS, refused connection,
    timeouts configured on the transport) propagate as httpx exceptions.

    Requests go through the config's shared :class:`HttpSession`; the client
    never closes it.

    Subclasses add one method per endpoint on top of the verb helpers.

    Args:
        credentials: Resolved credential strategy, shared with sibling clients.
        config: Client configuration, shared with sibling clients.
    """

    def __init__(self, credentials: Credentials, config: ClientConfig):
        self._credentials = credentials
        self._config = config

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def get(self, path: str) -> APIResponse:
        return await self._request("GET", path)

    async def delete(self, path: str) -> APIResponse:
        return await self._request("DELETE", path)

    async def delete_with_body(self, path: str, body: Any) -> APIResponse:
        return await self._request("DELETE", path, body)

    async def post(self, path: str, body: Any) -> APIResponse:
        return await self._request("POST", path, body)

    async def put(self, path: str, body: Any) -> APIResponse:
        return await self._request("PUT", path, body)

    async def _request(self, method: str, path: str, body: Any = _NO_BODY) -> APIResponse:
        url = self._config.base_url + path
        headers = dict(self._credentials.create_auth_headers())
        kwargs = {} if body is _NO_BODY else {"json": body}

        res = await self._config.session.client.request(method, url, headers=headers, **kwargs)
        logger.debug(f"{method} {url} -> {res.status_code}")
        return APIResponse.from_response(res)
