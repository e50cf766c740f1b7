"""Authentication components for Garoon clients.

This module provides:
- Credential variants (password, session token, OAuth token) and the
  strategy that turns them into request headers
- Multi-source credential resolution (value → env → .env → secret file → default)

Example:
    ```python
    from garoon_rest.auth import AuthStrategy, CredentialResolver, PasswordAuth

    resolver = CredentialResolver()
    strategy = AuthStrategy(
        PasswordAuth(
            username=resolver.resolve(env_var_name="GAROON_USERNAME", required=True),
            password=resolver.resolve(env_var_name="GAROON_PASSWORD", required=True),
        )
    )
    ```
"""

from garoon_rest.auth.credentials import CredentialResolver
from garoon_rest.auth.exceptions import (
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)
from garoon_rest.auth.strategies import (
    PASSWORD_AUTH_HEADER,
    REQUEST_TOKEN_HEADER,
    AuthStrategy,
    BasicAuth,
    Credentials,
    OAuthTokenAuth,
    PasswordAuth,
    SessionAuth,
    compute_auth_headers,
    compute_basic_auth_header,
    validate_credentials,
)

__all__ = [
    "PASSWORD_AUTH_HEADER",
    "REQUEST_TOKEN_HEADER",
    "AuthStrategy",
    "BasicAuth",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
    "OAuthTokenAuth",
    "PasswordAuth",
    "SessionAuth",
    "compute_auth_headers",
    "compute_basic_auth_header",
    "validate_credentials",
]
