"""Testing utilities for Garoon clients.

`MockClient` implements the `HttpClient` contract without any network. It
records every call as ``{"path", "method", "params"}`` in call order, answers
with queued responses and can be primed with failures that go through the
same handler-then-raise path as the real transport.

Example:
    ```python
    from garoon_rest.resources import ScheduleClient
    from garoon_rest.testing import MockClient


    async def test_get_event():
        mock_client = MockClient()
        mock_client.mock_response({"id": "1", "subject": "Weekly conference"})

        event = await ScheduleClient(mock_client).get_event({"id": 1})

        assert mock_client.get_logs()[0] == {"path": "/api/v1/schedule/events/1", "method": "get", "params": {}}
        assert event["subject"] == "Weekly conference"
    ```
"""

import asyncio
from collections import deque
from collections.abc import Mapping
from typing import Any

from garoon_rest.errors.handler import ErrorResponseHandler, build_http_error, notify_error_handler
from garoon_rest.errors.models import ErrorEnvelope
from garoon_rest.request import FormData, RequestConfigBuilder, RequestDescriptor, ResponseType

__all__ = ["MockClient"]


class MockClient:
    """Recording `HttpClient` for tests.

    Args:
        request_config_builder: When given, every call is also built into a
            descriptor, so encoding and authentication errors surface as they
            would in production. Built descriptors are kept in ``descriptors``.
        error_response_handler: Called once with every primed error before it is raised
    """

    def __init__(
        self,
        *,
        request_config_builder: RequestConfigBuilder | None = None,
        error_response_handler: ErrorResponseHandler | None = None,
    ) -> None:
        self._request_config_builder = request_config_builder
        self._error_response_handler = error_response_handler
        self._logs: list[dict[str, Any]] = []
        self._responses: deque[tuple[str, Any]] = deque()
        self.descriptors: list[RequestDescriptor] = []

    def mock_response(self, body: Any) -> None:
        """Queue the decoded body returned by the next call."""
        self._responses.append(("response", body))

    def mock_error(
        self,
        status: int,
        data: Any = None,
        *,
        status_text: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Queue a failed response for the next call."""
        envelope = ErrorEnvelope(data=data, status=status, status_text=status_text, headers=headers or {})
        self._responses.append(("error", envelope))

    def get_logs(self) -> list[dict[str, Any]]:
        return list(self._logs)

    async def get(self, path: str, params: Mapping[str, Any]) -> Any:
        return await self._request("get", path, params)

    async def get_data(self, path: str, params: Mapping[str, Any]) -> bytes:
        return await self._request("get", path, params, response_type="arraybuffer")

    async def post(self, path: str, params: Mapping[str, Any]) -> Any:
        return await self._request("post", path, params)

    async def post_data(self, path: str, params: FormData) -> Any:
        return await self._request("post", path, params)

    async def put(self, path: str, params: Mapping[str, Any]) -> Any:
        return await self._request("put", path, params)

    async def patch(self, path: str, params: Mapping[str, Any]) -> Any:
        return await self._request("patch", path, params)

    async def delete(self, path: str, params: Mapping[str, Any]) -> Any:
        return await self._request("delete", path, params)

    async def _request(
        self,
        method: str,
        path: str,
        params: Mapping[str, Any] | FormData,
        *,
        response_type: ResponseType = "json",
    ) -> Any:
        if self._request_config_builder is not None:
            descriptor = await self._request_config_builder.build(method, path, params, response_type=response_type)
            self.descriptors.append(descriptor)

        self._logs.append({"path": path, "method": method, "params": params})
        # Stand-in for the network round trip
        await asyncio.sleep(0)

        if not self._responses:
            return b"" if response_type == "arraybuffer" else {}

        kind, value = self._responses.popleft()
        if kind == "error":
            error = build_http_error(value)
            notify_error_handler(self._error_response_handler, error)
            raise error
        return value
