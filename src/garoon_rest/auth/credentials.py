"""Where Garoon settings and secrets come from.

`ClientConfig.from_env()` reads every setting through a `CredentialResolver`,
which looks in these places and stops at the first hit:

1. A value passed in explicitly
2. The environment variable, after a ``.env`` file has been merged into the
   environment by python-dotenv
3. A file named by ``<ENV_VAR>_FILE``, as container secrets are mounted
4. The default

Example:
    ```python
    from garoon_rest.auth import CredentialResolver

    resolver = CredentialResolver()

    base_url = resolver.resolve(env_var_name="GAROON_BASE_URL", required=True, mask_in_logs=False)

    # GAROON_PASSWORD_FILE=/run/secrets/garoon_password works too
    password = resolver.resolve(env_var_name="GAROON_PASSWORD")
    ```

Resolved secrets only ever reach the log as ``***``.
"""

import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from garoon_rest.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

FILE_SUFFIX = "_FILE"
MASK = "***"


def _read_secret_file(path: Path) -> str:
    """Return the stripped contents of ``path``, or raise CredentialFileError."""
    try:
        return path.read_text().strip()
    except FileNotFoundError:
        raise CredentialFileError(f"Credential file not found: {path}") from None
    except PermissionError:
        raise CredentialFileError(f"Permission denied reading credential file: {path}") from None
    except OSError as e:
        raise CredentialFileError(f"Error reading credential file {path}: {e}") from e


class CredentialResolver:
    """Look up one setting at a time across explicit values, env, secret files and defaults.

    Args:
        dotenv_path: ``.env`` file to merge into the environment. When None,
            python-dotenv searches from the working directory upwards.
        load_dotenv: Set to False to leave the environment untouched.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_lock = Lock()
        self._dotenv_loaded = False

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Merged .env file into the environment")
            except OSError as e:
                logger.warning(f"Could not read .env file: {e}")
            self._dotenv_loaded = True

    def _lookup(self, value: str | None, env_var_name: str | None, default: str | None) -> tuple[str | None, str]:
        if value is not None:
            return value, "explicit value"
        if env_var_name:
            if env_var_name in os.environ:
                return os.environ[env_var_name], f"${env_var_name}"
            file_var = env_var_name + FILE_SUFFIX
            if file_var in os.environ:
                return self.resolve_from_file(env_var_name=file_var, required=True), f"file named by ${file_var}"
        if default is not None:
            return default, "default"
        return None, ""

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Resolve one setting.

        Args:
            value: Explicit value, used as is when not None.
            env_var_name: Environment variable to read. ``<env_var_name>_FILE``
                is consulted when the variable itself is unset.
            default: Fallback when no source has a value.
            required: Raise instead of returning None.
            mask_in_logs: Log the value as ``***``. Turn off for non-secrets
                such as the base URL.

        Raises:
            CredentialNotFoundError: ``required`` and no source had a value.
            CredentialFileError: ``<env_var_name>_FILE`` names an unreadable file.
        """
        result, source = self._lookup(value, env_var_name, default)

        if result is None:
            if required:
                message = "Required credential not found"
                if env_var_name:
                    message += f" (checked env var: {env_var_name})"
                raise CredentialNotFoundError(message, env_var_name=env_var_name)
            return None

        logger.debug(f"Resolved credential from {source}: {MASK if mask_in_logs else result}")
        return result

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from ``file_path``, or from the path held in ``env_var_name``.

        ``~`` and ``$VAR`` in the path are expanded. A file that cannot be read
        yields None unless ``required`` is set.

        Raises:
            CredentialFileError: ``required`` and no path was given or the file
                could not be read.
        """
        raw_path = str(file_path) if file_path is not None else os.environ.get(env_var_name or "") or None
        if raw_path is None:
            if not required:
                return None
            message = "No file path provided for credential resolution"
            if env_var_name:
                message += f" (env var '{env_var_name}' not set)"
            raise CredentialFileError(message)

        path = Path(os.path.expanduser(os.path.expandvars(raw_path)))
        try:
            content = _read_secret_file(path)
        except CredentialFileError as e:
            if required:
                raise
            logger.warning(str(e))
            return None

        logger.debug(f"Resolved credential from file {path}: {MASK}")
        return content
