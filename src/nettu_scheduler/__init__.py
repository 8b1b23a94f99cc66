"""Nettu Scheduler Client - async Python client for the Nettu scheduler API.

- Admin and end-user client bundles sharing one credential strategy
- Status-as-data responses: every HTTP status comes back as an APIResponse
- Optional credential resolution from the environment or a .env file
- Optional retry transport for rate limits and flaky gateways

Example:
    ```python
    from nettu_scheduler import ClientConfig, PartialCredentials, create_user_client

    client = create_user_client(
        ClientConfig(base_url="https://scheduler.example.com/api/v1"),
        PartialCredentials(nettu_account="acc-123", token=user_jwt),
    )
    res = await client.user.me()
    ```
"""

from nettu_scheduler.config import ClientConfig
from nettu_scheduler.auth import (
    AccountCreds,
    CredentialResolver,
    Credentials,
    EmptyCreds,
    PartialCredentials,
    UserCreds,
    create_creds,
)
from nettu_scheduler.response import APIResponse
from nettu_scheduler.client import BaseClient
from nettu_scheduler.session import HttpSession
from nettu_scheduler.factory import NettuClient, NettuUserClient, create_client, create_user_client

__version__ = "0.1.0"

__all__ = [
    "APIResponse",
    "AccountCreds",
    "BaseClient",
    "ClientConfig",
    "CredentialResolver",
    "Credentials",
    "EmptyCreds",
    "HttpSession",
    "NettuClient",
    "NettuUserClient",
    "PartialCredentials",
    "UserCreds",
    "__version__",
    "create_client",
    "create_creds",
    "create_user_client",
]
