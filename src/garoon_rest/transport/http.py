"""HTTP transport for Garoon REST API calls.

`DefaultHttpClient` executes the descriptors built by `RequestConfigBuilder`
over an `httpx.AsyncClient`, decodes successful responses and normalizes
failures:

1. a non-2xx response becomes an `HttpError` subclass, a connection level
   failure becomes a `TransportError`
2. the registered error handler, if any, is called once with that error
3. the error is raised to the caller

Nothing is retried.
"""

import logging
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from garoon_rest.errors.handler import (
    ErrorResponseHandler,
    build_http_error,
    build_transport_error,
    notify_error_handler,
)
from garoon_rest.errors.models import ErrorEnvelope
from garoon_rest.request import FormData, RequestConfigBuilder, RequestDescriptor, ResponseType

logger = logging.getLogger(__name__)

Params = Mapping[str, Any]


class HttpClient(Protocol):
    """Operations resource clients call. One per HTTP verb."""

    async def get(self, path: str, params: Params) -> Any: ...

    async def get_data(self, path: str, params: Params) -> bytes: ...

    async def post(self, path: str, params: Params) -> Any: ...

    async def post_data(self, path: str, params: FormData) -> Any: ...

    async def put(self, path: str, params: Params) -> Any: ...

    async def patch(self, path: str, params: Params) -> Any: ...

    async def delete(self, path: str, params: Params) -> Any: ...


class DefaultHttpClient:
    """httpx based `HttpClient`.

    Args:
        request_config_builder: Builds the descriptor for each call
        error_response_handler: Called once with every error before it is raised
        client: An existing ``httpx.AsyncClient``. When omitted, one is created
            on first use with the configured proxy, and closed by ``aclose()``.
            An injected client is used as is (its own proxy settings apply).

    Example:
        ```python
        async with DefaultHttpClient(builder) as http_client:
            event = await http_client.get("/api/v1/schedule/events/1", {})
        ```
    """

    def __init__(
        self,
        request_config_builder: RequestConfigBuilder,
        *,
        error_response_handler: ErrorResponseHandler | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._request_config_builder = request_config_builder
        self._error_response_handler = error_response_handler
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get(self, path: str, params: Params) -> Any:
        return await self._request("get", path, params)

    async def get_data(self, path: str, params: Params) -> bytes:
        return await self._request("get", path, params, response_type="arraybuffer")

    async def post(self, path: str, params: Params) -> Any:
        return await self._request("post", path, params)

    async def post_data(self, path: str, params: FormData) -> Any:
        return await self._request("post", path, params)

    async def put(self, path: str, params: Params) -> Any:
        return await self._request("put", path, params)

    async def patch(self, path: str, params: Params) -> Any:
        return await self._request("patch", path, params)

    async def delete(self, path: str, params: Params) -> Any:
        return await self._request("delete", path, params)

    def _get_client(self, descriptor: RequestDescriptor) -> httpx.AsyncClient:
        if self._client is None:
            proxy = descriptor.proxy.url if descriptor.proxy is not None else None
            self._client = httpx.AsyncClient(proxy=proxy)
        return self._client

    async def _request(
        self,
        method: str,
        path: str,
        params: Params | FormData,
        *,
        response_type: ResponseType = "json",
    ) -> Any:
        descriptor = await self._request_config_builder.build(method, path, params, response_type=response_type)
        client = self._get_client(descriptor)

        logger.debug(f"Sending {descriptor.method} {descriptor.url}")
        try:
            response = await client.request(
                descriptor.method,
                descriptor.url,
                headers=dict(descriptor.headers),
                content=descriptor.body,
                timeout=descriptor.timeout,
            )
        except httpx.RequestError as e:
            error = build_transport_error(e, descriptor.method, descriptor.url)
            notify_error_handler(self._error_response_handler, error)
            raise error from e

        if not response.is_success:
            if response.status_code == 401:
                self._request_config_builder.auth_strategy.invalidate()
            error = build_http_error(ErrorEnvelope.from_response(response), response)
            notify_error_handler(self._error_response_handler, error)
            raise error

        logger.debug(f"{descriptor.method} {descriptor.url} -> {response.status_code}")
        return self._decode(response, descriptor.response_type)

    @staticmethod
    def _decode(response: httpx.Response, response_type: ResponseType) -> Any:
        if response_type == "arraybuffer":
            return response.content
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.debug(f"Response from {response.request.url} is not JSON, returning text")
            return response.text
