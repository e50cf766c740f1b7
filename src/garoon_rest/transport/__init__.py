"""Transport layer for Garoon clients.

`HttpClient` is the contract resource clients are written against: one
coroutine per HTTP verb, each taking ``(path, params)``. `DefaultHttpClient`
implements it on top of httpx; `garoon_rest.testing.MockClient` implements it
for tests.

Example:
    ```python
    from garoon_rest.config import ClientConfig
    from garoon_rest.request import RequestConfigBuilder
    from garoon_rest.transport import DefaultHttpClient

    builder = RequestConfigBuilder(ClientConfig.from_env())
    async with DefaultHttpClient(builder) as http_client:
        events = await http_client.get("/api/v1/schedule/events", {"limit": 10})
    ```
"""

from garoon_rest.transport.http import DefaultHttpClient, HttpClient

__all__ = ["DefaultHttpClient", "HttpClient"]
