"""Errors raised before any request is sent: missing or unreadable credentials.

HTTP outcomes never end up here; those come back as an ``APIResponse``.
"""


class CredentialError(Exception):
    """Base for problems setting up Nettu credentials."""

    pass


class CredentialNotFoundError(CredentialError):
    """No usable Nettu credentials.

    Raised in two places:

    - ``create_client`` / ``create_user_client`` with
      ``require_credentials=True`` when neither an API key nor a nettu
      account was given, instead of silently sending unauthenticated requests.
    - ``CredentialResolver.resolve(required=True)`` when a setting such as
      ``NETTU_API_KEY`` is set nowhere.

    Attributes:
        env_var_name: The environment variable that was checked, if any.
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A required user JWT file (e.g. ``NETTU_TOKEN_FILE``) could not be read."""

    pass
