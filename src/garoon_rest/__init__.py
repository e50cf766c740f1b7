"""Garoon REST - typed async client for the Garoon REST API.

This library provides:
- Resource clients for schedule, base (users/organizations) and presence
- Password, session token and OAuth authentication
- Normalized errors carrying status, headers and response body
- Testing utilities (a recording mock transport)

Example:
    ```python
    from garoon_rest import ClientConfig, GaroonRestAPIClient, PasswordAuth

    config = ClientConfig(
        base_url="https://example.cybozu.com/g",
        auth=PasswordAuth(username="cybozu", password="cybozu"),
    )

    async with GaroonRestAPIClient(config) as client:
        events = await client.schedule.get_events(
            {
                "limit": 100,
                "fields": ["id", "creator"],
                "orderBy": {"property": "createdAt", "order": "asc"},
            }
        )
    ```
"""

__version__ = "0.1.0"

from garoon_rest.auth import BasicAuth, OAuthTokenAuth, PasswordAuth, SessionAuth  # noqa: E402
from garoon_rest.client import GaroonRestAPIClient  # noqa: E402
from garoon_rest.config import ClientConfig, ProxyAuth, ProxyConfig  # noqa: E402

__all__ = [
    "BasicAuth",
    "ClientConfig",
    "GaroonRestAPIClient",
    "OAuthTokenAuth",
    "PasswordAuth",
    "ProxyAuth",
    "ProxyConfig",
    "SessionAuth",
    "__version__",
]
