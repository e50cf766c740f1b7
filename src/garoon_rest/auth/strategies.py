"""Authentication strategies for the Garoon REST API.

Garoon accepts three ways of authenticating a request:

| Credentials | Headers sent |
|-------------|--------------|
| `PasswordAuth` | `X-Cybozu-Authorization: base64(username:password)` |
| `SessionAuth` | `X-Requested-With: XMLHttpRequest`, `X-Cybozu-RequestToken: <token>` |
| `OAuthTokenAuth` | `Authorization: Bearer <access token>` |

A Garoon installation behind a reverse proxy may additionally require HTTP
Basic authentication (`BasicAuth`), which is layered on top of the password or
session headers.

Credential values are immutable. The only mutable state is the session token
cache held by `AuthStrategy`, which refreshes through a single shared task so
that concurrent requests never trigger more than one refresh.

Example:
    ```python
    from garoon_rest.auth import AuthStrategy, SessionAuth


    async def fetch_token() -> str:
        ...


    strategy = AuthStrategy(SessionAuth(token_provider=fetch_token))
    headers = await strategy.headers()
    ```
"""

import asyncio
import base64
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import ClassVar

from garoon_rest.errors.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PASSWORD_AUTH_HEADER = "X-Cybozu-Authorization"
REQUEST_TOKEN_HEADER = "X-Cybozu-RequestToken"

TokenProvider = Callable[[], Awaitable[str]]


@dataclass(frozen=True)
class PasswordAuth:
    """Garoon user name and password."""

    kind: ClassVar[str] = "password"

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class SessionAuth:
    """Session request token, static or obtained from an async provider.

    When ``token`` is None the first request awaits ``token_provider``.
    """

    kind: ClassVar[str] = "session"

    token: str | None = field(default=None, repr=False)
    token_provider: TokenProvider | None = field(default=None, repr=False)


@dataclass(frozen=True)
class OAuthTokenAuth:
    """OAuth 2.0 access token."""

    kind: ClassVar[str] = "oauth"

    access_token: str = field(repr=False)


@dataclass(frozen=True)
class BasicAuth:
    """HTTP Basic credentials for a reverse proxy in front of Garoon."""

    username: str
    password: str = field(repr=False)


Credentials = PasswordAuth | SessionAuth | OAuthTokenAuth


def _encode_pair(username: str, password: str) -> str:
    return base64.b64encode(f"{username}:{password}".encode()).decode("ascii")


def validate_credentials(credentials: Credentials) -> None:
    """Check that a credential value carries every field it needs.

    Raises:
        ConfigurationError: If a required field is missing or the type is unknown.
    """
    if isinstance(credentials, PasswordAuth):
        if not credentials.username:
            raise ConfigurationError("Password authentication requires a username")
        if not credentials.password:
            raise ConfigurationError("Password authentication requires a password")
    elif isinstance(credentials, SessionAuth):
        if not credentials.token and credentials.token_provider is None:
            raise ConfigurationError("Session authentication requires a token or a token provider")
    elif isinstance(credentials, OAuthTokenAuth):
        if not credentials.access_token:
            raise ConfigurationError("OAuth authentication requires an access token")
    else:
        raise ConfigurationError(f"Unsupported credentials type: {type(credentials).__name__}")


def compute_auth_headers(credentials: Credentials, token: str | None = None) -> dict[str, str]:
    """Compute the authentication headers for one request.

    Args:
        credentials: The client's credentials
        token: Resolved session token; overrides ``SessionAuth.token``

    Returns:
        Header name to value mapping holding exactly one auth representation
    """
    if isinstance(credentials, PasswordAuth):
        return {PASSWORD_AUTH_HEADER: _encode_pair(credentials.username, credentials.password)}

    if isinstance(credentials, SessionAuth):
        session_token = token if token is not None else credentials.token
        if not session_token:
            raise ConfigurationError("Session token has not been resolved")
        return {
            "X-Requested-With": "XMLHttpRequest",
            REQUEST_TOKEN_HEADER: session_token,
        }

    if isinstance(credentials, OAuthTokenAuth):
        return {"Authorization": f"Bearer {credentials.access_token}"}

    raise ConfigurationError(f"Unsupported credentials type: {type(credentials).__name__}")


def compute_basic_auth_header(basic_auth: BasicAuth) -> dict[str, str]:
    """Compute the reverse-proxy ``Authorization: Basic`` header."""
    return {"Authorization": f"Basic {_encode_pair(basic_auth.username, basic_auth.password)}"}


class AuthStrategy:
    """The single authentication strategy a client uses for its whole lifetime.

    If a session token refresh fails, every request waiting on that refresh
    receives the same exception. The next request starts a new refresh.
    """

    def __init__(self, credentials: Credentials) -> None:
        validate_credentials(credentials)
        self._credentials = credentials
        self._token = credentials.token if isinstance(credentials, SessionAuth) else None
        self._refresh_task: asyncio.Task[str] | None = None

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def kind(self) -> str:
        return self._credentials.kind

    async def headers(self) -> dict[str, str]:
        """Return the authentication headers, refreshing the session token if needed."""
        if not isinstance(self._credentials, SessionAuth):
            return compute_auth_headers(self._credentials)

        token = self._token
        if token is None:
            token = await self.refresh()
        return compute_auth_headers(self._credentials, token)

    def invalidate(self) -> None:
        """Drop the cached session token so the next request fetches a new one.

        Static session tokens (no provider) are kept since there is nothing to
        refresh them from.
        """
        if isinstance(self._credentials, SessionAuth) and self._credentials.token_provider is not None:
            logger.debug("Invalidated cached Garoon session token")
            self._token = None

    async def refresh(self) -> str:
        """Fetch a new session token, joining a refresh already in flight."""
        if not isinstance(self._credentials, SessionAuth) or self._credentials.token_provider is None:
            raise ConfigurationError("Session token cannot be refreshed: no token provider configured")

        if self._refresh_task is None:
            self._refresh_task = asyncio.ensure_future(self._run_refresh(self._credentials.token_provider))
        # Cancelling one waiter must not cancel the refresh the others share
        return await asyncio.shield(self._refresh_task)

    async def _run_refresh(self, token_provider: TokenProvider) -> str:
        logger.debug("Refreshing Garoon session token")
        try:
            token = await token_provider()
            if not token:
                raise ConfigurationError("Session token provider returned an empty token")
            self._token = token
            return token
        finally:
            self._refresh_task = None
