"""Authentication for the Nettu scheduler client.

- Credential strategies (account API key, user account + JWT, none)
- Resolution of a partial credential configuration into one strategy
- Optional multi-source resolution (value → env → .env → default)

Example:
    ```python
    from nettu_scheduler.auth import CredentialResolver, create_creds

    resolver = CredentialResolver()
    creds = create_creds(resolver.resolve_credentials())
    ```
"""

from nettu_scheduler.auth.credentials import (
    AccountCreds,
    Credentials,
    EmptyCreds,
    PartialCredentials,
    UserCreds,
    create_creds,
)
from nettu_scheduler.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from nettu_scheduler.auth.resolver import CredentialResolver

__all__ = [
    "AccountCreds",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "EmptyCreds",
    "PartialCredentials",
    "UserCreds",
    "create_creds",
]
