"""Credential strategies for the Nettu scheduler API.

The service accepts two kinds of authentication:

- Account level: an API key sent as ``x-api-key``. Grants the full admin surface.
- User level: the account id sent as ``nettu-account``, optionally with a
  user JWT sent as ``authorization: Bearer <token>``.

A client without either sends no auth headers at all (``EmptyCreds``).

Example:
    ```python
    from nettu_scheduler.auth import PartialCredentials, create_creds

    creds = create_creds(PartialCredentials(nettu_account="acc-1", token="jwt"))
    creds.create_auth_headers()
    # {'nettu-account': 'acc-1', 'authorization': 'Bearer jwt'}
    ```
"""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, TypeAlias


@dataclass(frozen=True)
class PartialCredentials:
    """Whatever credential information the caller has at hand.

    At most one mode ends up active, see :func:`create_creds`.
    """

    api_key: str | None = None
    nettu_account: str | None = None
    token: str | None = None


@dataclass(frozen=True)
class AccountCreds:
    """Account (admin) credentials backed by an API key."""

    kind: ClassVar[str] = "account"

    api_key: str

    def create_auth_headers(self) -> Mapping[str, str]:
        return MappingProxyType({"x-api-key": self.api_key})


@dataclass(frozen=True)
class UserCreds:
    """End-user credentials: the owning account plus an optional user JWT."""

    kind: ClassVar[str] = "user"

    nettu_account: str
    token: str | None = None

    def create_auth_headers(self) -> Mapping[str, str]:
        headers = {"nettu-account": self.nettu_account}
        if self.token:
            headers["authorization"] = f"Bearer {self.token}"
        return MappingProxyType(headers)


@dataclass(frozen=True)
class EmptyCreds:
    """No credentials. Only public endpoints will accept these requests."""

    kind: ClassVar[str] = "empty"

    def create_auth_headers(self) -> Mapping[str, str]:
        return MappingProxyType({})


Credentials: TypeAlias = AccountCreds | UserCreds | EmptyCreds


def create_creds(partial: PartialCredentials | None = None) -> Credentials:
    """Pick the credential strategy for a partial configuration.

    First match wins:
    1. ``api_key`` set -> :class:`AccountCreds`
    2. ``nettu_account`` set -> :class:`UserCreds` (with ``token`` if any)
    3. otherwise -> :class:`EmptyCreds`

    Empty strings count as unset, but a chosen strategy never validates
    its values.
    """
    partial = partial or PartialCredentials()
    if partial.api_key:
        return AccountCreds(partial.api_key)
    if partial.nettu_account:
        return UserCreds(partial.nettu_account, partial.token)
    return EmptyCreds()
