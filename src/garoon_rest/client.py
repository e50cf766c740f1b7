"""Entry point composing configuration, authentication, transport and resources."""

import logging

from garoon_rest.auth.strategies import AuthStrategy
from garoon_rest.config import ClientConfig
from garoon_rest.errors.exceptions import GaroonError
from garoon_rest.errors.handler import ErrorResponseHandler
from garoon_rest.request import RequestConfigBuilder
from garoon_rest.resources import BaseClient, PresenceClient, ScheduleClient
from garoon_rest.transport.http import DefaultHttpClient, HttpClient

logger = logging.getLogger(__name__)


def log_error_response(error: GaroonError) -> None:
    """Default error handler: log the failure, the caller still gets the exception."""
    logger.warning(f"Garoon REST API call failed: {error}")


class GaroonRestAPIClient:
    """Client for the Garoon REST API.

    Args:
        config: Client configuration. Defaults to ``ClientConfig.from_env()``.
        http_client: Transport to use instead of a `DefaultHttpClient`.
        error_response_handler: Observer called once per failed call before
            the error is raised. Defaults to logging the failure.

    Example:
        ```python
        from garoon_rest import ClientConfig, GaroonRestAPIClient, PasswordAuth

        config = ClientConfig(
            base_url="https://example.cybozu.com/g",
            auth=PasswordAuth(username="cybozu", password="cybozu"),
        )
        async with GaroonRestAPIClient(config) as client:
            event = await client.schedule.get_event({"id": 1})
        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http_client: HttpClient | None = None,
        error_response_handler: ErrorResponseHandler | None = log_error_response,
    ) -> None:
        self._config = config or ClientConfig.from_env()
        self._auth_strategy = AuthStrategy(self._config.auth)
        self._request_config_builder = RequestConfigBuilder(self._config, self._auth_strategy)

        if http_client is None:
            http_client = DefaultHttpClient(
                self._request_config_builder,
                error_response_handler=error_response_handler,
            )
        self._http_client = http_client

        self.schedule = ScheduleClient(http_client)
        self.base = BaseClient(http_client)
        self.presence = PresenceClient(http_client)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def request_config_builder(self) -> RequestConfigBuilder:
        return self._request_config_builder

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying transport if it holds network resources."""
        if isinstance(self._http_client, DefaultHttpClient):
            await self._http_client.aclose()
