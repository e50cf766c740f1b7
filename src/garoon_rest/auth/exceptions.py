"""Exceptions raised while resolving credentials.

Credential problems are configuration problems: they are raised when a client
is being set up, never in the middle of a request.

Example:
    ```python
    from garoon_rest.auth.exceptions import CredentialNotFoundError

    if not password:
        raise CredentialNotFoundError("Garoon password not found", env_var_name="GAROON_PASSWORD")
    ```
"""

from garoon_rest.errors.exceptions import ConfigurationError


class CredentialError(ConfigurationError):
    """Base exception for credential-related errors.

    All credential-specific exceptions inherit from this class,
    making it easy to catch any credential-related error.
    """

    pass


class CredentialNotFoundError(CredentialError):
    """Raised when a required credential cannot be resolved.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        """Initialize CredentialNotFoundError.

        Args:
            message: Error message describing what credential is missing.
            env_var_name: Optional environment variable name for reference.
        """
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """Raised when a credential file cannot be read."""

    pass
