"""Factories that build the admin and user client bundles.

Example:
    ```python
    from nettu_scheduler import ClientConfig, PartialCredentials, create_client

    config = ClientConfig(base_url="https://scheduler.example.com/api/v1")
    async with create_client(config, PartialCredentials(api_key="secret")) as client:
        res = await client.user.create()
        if res.status == 201:
            print(res.data["user"]["id"])
    ```

Bundles built from the same config share it, and with it one HTTP
session. Credentials are resolved per factory call: two bundles built from
the same partial credentials hold equal, but not identical, strategies.
"""

import logging
from dataclasses import dataclass

from nettu_scheduler.auth.credentials import Credentials, EmptyCreds, PartialCredentials, create_creds
from nettu_scheduler.auth.exceptions import CredentialNotFoundError
from nettu_scheduler.client import BaseClient
from nettu_scheduler.config import ClientConfig
from nettu_scheduler.resources import (
    AccountClient,
    CalendarClient,
    CalendarUserClient,
    EventClient,
    EventUserClient,
    HealthClient,
    ScheduleClient,
    ScheduleUserClient,
    ServiceClient,
    ServiceUserClient,
    UserClient,
    UserUserClient,
)

logger = logging.getLogger(__name__)


class _ClosableBundle:
    """Closes the HTTP session shared by the bundle's sub-clients.

    The session belongs to the :class:`ClientConfig`, so closing one bundle
    also closes it for any other bundle built from the same config. A later
    request opens a fresh session.
    """

    calendar: BaseClient

    async def aclose(self) -> None:
        await self.calendar.config.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()


@dataclass(frozen=True)
class NettuClient(_ClosableBundle):
    """Admin bundle: the full account and service surface."""

    account: AccountClient
    calendar: CalendarClient
    events: EventClient
    health: HealthClient
    service: ServiceClient
    schedule: ScheduleClient
    user: UserClient


@dataclass(frozen=True)
class NettuUserClient(_ClosableBundle):
    """End-user bundle. Has no account or health access."""

    calendar: CalendarUserClient
    events: EventUserClient
    service: ServiceUserClient
    schedule: ScheduleUserClient
    user: UserUserClient


def _resolve_creds(credentials: PartialCredentials | None, require_credentials: bool) -> Credentials:
    creds = create_creds(credentials)
    if require_credentials and isinstance(creds, EmptyCreds):
        raise CredentialNotFoundError("No api key or nettu account provided to nettu client.")
    logger.debug(f"Using {creds.kind} credentials for nettu client")
    return creds


def create_client(
    config: ClientConfig,
    credentials: PartialCredentials | None = None,
    *,
    require_credentials: bool = False,
) -> NettuClient:
    """Build the admin bundle.

    Without credentials the bundle silently sends unauthenticated requests,
    unless ``require_credentials`` is set.

    Raises:
        CredentialNotFoundError: If ``require_credentials`` and neither an API
            key nor a nettu account was given.
    """
    creds = _resolve_creds(credentials, require_credentials)
    return NettuClient(
        account=AccountClient(creds, config),
        calendar=CalendarClient(creds, config),
        events=EventClient(creds, config),
        health=HealthClient(creds, config),
        service=ServiceClient(creds, config),
        schedule=ScheduleClient(creds, config),
        user=UserClient(creds, config),
    )


def create_user_client(
    config: ClientConfig,
    credentials: PartialCredentials | None = None,
    *,
    require_credentials: bool = False,
) -> NettuUserClient:
    """Build the end-user bundle. Same credential rules as :func:`create_client`."""
    creds = _resolve_creds(credentials, require_credentials)
    return NettuUserClient(
        calendar=CalendarUserClient(creds, config),
        events=EventUserClient(creds, config),
        service=ServiceUserClient(creds, config),
        schedule=ScheduleUserClient(creds, config),
        user=UserUserClient(creds, config),
    )
