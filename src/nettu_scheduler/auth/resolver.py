"""Multi-source resolution of client credentials and configuration.

Nothing in the client reads the environment on its own. This resolver is
the opt-in way to build :class:`PartialCredentials` and :class:`ClientConfig`
from environment variables or a ``.env`` file.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable (``.env`` values are loaded into the environment)
3. Default value

Environment variables:
    NETTU_BASE_URL: API base URL, e.g. ``https://scheduler.example.com/api/v1``
    NETTU_API_KEY: account API key
    NETTU_ACCOUNT: account id for user-level access
    NETTU_TOKEN: user JWT
    NETTU_TOKEN_FILE: path to a file holding the user JWT

Example:
    ```python
    from nettu_scheduler import create_user_client
    from nettu_scheduler.auth import CredentialResolver

    resolver = CredentialResolver()
    client = create_user_client(
        resolver.resolve_client_config(),
        resolver.resolve_credentials(),
    )
    ```

Credential values are never logged, only where they came from.
"""

import logging
import os
from pathlib import Path
from threading import Lock

import httpx
from dotenv import load_dotenv

from nettu_scheduler.auth.credentials import PartialCredentials
from nettu_scheduler.auth.exceptions import CredentialFileError, CredentialNotFoundError
from nettu_scheduler.config import DEFAULT_BASE_URL, ClientConfig

logger = logging.getLogger(__name__)

BASE_URL_ENV = "NETTU_BASE_URL"
API_KEY_ENV = "NETTU_API_KEY"
ACCOUNT_ENV = "NETTU_ACCOUNT"
TOKEN_ENV = "NETTU_TOKEN"
TOKEN_FILE_ENV = "NETTU_TOKEN_FILE"


class CredentialResolver:
    """Resolve client settings from explicit values, the environment and defaults.

    Args:
        dotenv_path: Path to a .env file. If None, python-dotenv searches
            parent directories.
        load_dotenv: Whether to load a .env file at all.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for nettu client settings")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Only ever attempted once
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve a single setting.

        Args:
            value: Explicit value. Wins over every other source.
            env_var_name: Environment variable to check.
            default: Fallback when neither value nor variable is set.
            required: Raise instead of returning None when unresolved.
            mask_in_logs: Log ``***`` instead of the value. Disable only for
                non-secret settings such as the base URL.

        Returns:
            The resolved value, or None.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing was found.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and env_var_name in os.environ:
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            shown = "***" if mask_in_logs else result
            logger.debug(f"Resolved setting from {source}: {shown}")

        if required and result is None:
            error_msg = "Required credential not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise CredentialNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file, stripped of surrounding whitespace.

        The path may come directly or from ``env_var_name``; ``~`` and
        ``$VAR`` are expanded.

        Raises:
            CredentialFileError: If ``required`` and the file cannot be read.
        """
        path_to_use = None
        if file_path is not None:
            path_to_use = str(file_path)
        elif env_var_name:
            path_to_use = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if path_to_use is None:
            if required:
                error_msg = "No file path provided for credential resolution"
                if env_var_name:
                    error_msg += f" (env var '{env_var_name}' not set)"
                raise CredentialFileError(error_msg)
            return None

        path_obj = Path(os.path.expanduser(os.path.expandvars(path_to_use)))

        try:
            content = path_obj.read_text().strip()
        except FileNotFoundError:
            error_msg = f"Credential file not found: {path_obj}"
            if required:
                raise CredentialFileError(error_msg) from None
            logger.debug(error_msg)
            return None
        except OSError as e:
            error_msg = f"Error reading credential file {path_obj}: {e}"
            if required:
                raise CredentialFileError(error_msg) from e
            logger.warning(error_msg)
            return None

        logger.debug(f"Resolved credential from file: {path_obj} (***)")
        return content

    def resolve_credentials(
        self,
        *,
        api_key: str | None = None,
        nettu_account: str | None = None,
        token: str | None = None,
    ) -> PartialCredentials:
        """Collect whatever credentials are available.

        The token falls back to the file named by ``NETTU_TOKEN_FILE`` when
        neither an explicit token nor ``NETTU_TOKEN`` is set.
        """
        token = self.resolve(value=token, env_var_name=TOKEN_ENV)
        if token is None:
            token = self.resolve_from_file(env_var_name=TOKEN_FILE_ENV)

        return PartialCredentials(
            api_key=self.resolve(value=api_key, env_var_name=API_KEY_ENV),
            nettu_account=self.resolve(value=nettu_account, env_var_name=ACCOUNT_ENV, mask_in_logs=False),
            token=token,
        )

    def resolve_client_config(
        self,
        *,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ) -> ClientConfig:
        """Build a :class:`ClientConfig`, defaulting to a local scheduler."""
        resolved = self.resolve(
            value=base_url,
            env_var_name=BASE_URL_ENV,
            default=DEFAULT_BASE_URL,
            mask_in_logs=False,
        )
        return ClientConfig(base_url=resolved, transport=transport, timeout=timeout)
