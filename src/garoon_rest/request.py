"""Construction of fully-resolved HTTP requests.

`RequestConfigBuilder.build()` turns a logical ``(method, path, params)``
triple into a `RequestDescriptor`: absolute URL (with the query string for
GET/DELETE), authentication and content headers, serialized body, expected
response type and proxy settings. It never touches the network; the only
thing it may await is a session token refresh.
"""

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Literal

import httpx

from garoon_rest.auth.strategies import AuthStrategy, compute_basic_auth_header
from garoon_rest.config import ClientConfig, ProxyConfig
from garoon_rest.errors.exceptions import EncodingError

logger = logging.getLogger(__name__)

HttpMethod = Literal["get", "post", "put", "patch", "delete"]
ResponseType = Literal["json", "arraybuffer"]

QUERY_METHODS: frozenset[str] = frozenset(["GET", "DELETE"])
BODY_METHODS: frozenset[str] = frozenset(["POST", "PUT", "PATCH"])


class FormData:
    """Ordered multipart/form-data payload.

    Fields are encoded in the order they were appended; file contents are
    sent byte for byte.

    Example:
        ```python
        form = FormData()
        form.append("description", "Minutes")
        form.append_file("file", b"...", "minutes.pdf", "application/pdf")
        ```
    """

    def __init__(self) -> None:
        self._fields: list[tuple[str, tuple[str | None, bytes | str, str | None]]] = []

    def append(self, name: str, value: Any) -> None:
        """Append a plain form field."""
        if isinstance(value, bool):
            value = "true" if value else "false"
        self._fields.append((name, (None, value if isinstance(value, bytes) else str(value), None)))

    def append_file(self, name: str, content: bytes, filename: str, content_type: str | None = None) -> None:
        """Append a file part. The content type is guessed from the file name if omitted."""
        if not isinstance(content, (bytes, bytearray)):
            raise EncodingError(f"File content for {name!r} must be bytes, got {type(content).__name__}", name)
        self._fields.append((name, (filename, bytes(content), content_type)))

    @property
    def names(self) -> list[str]:
        return [name for name, _ in self._fields]

    def __iter__(self) -> Iterator[tuple[str, tuple[str | None, bytes | str, str | None]]]:
        return iter(list(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FormData(fields={self.names!r})"

    def encode(self) -> tuple[bytes, str]:
        """Encode the payload.

        Returns:
            ``(body, content_type)`` where the content type carries the boundary
        """
        if not self._fields:
            raise EncodingError("Cannot send an empty multipart form")
        # httpx does the multipart framing; the URL is irrelevant to the encoding
        request = httpx.Request("POST", "http://localhost/", files=list(self._fields))
        return request.read(), request.headers["Content-Type"]


@dataclass(frozen=True)
class RequestDescriptor:
    """Transport-ready description of one HTTP call. Built fresh for every call."""

    method: str
    url: str
    headers: Mapping[str, str]
    body: bytes | None = None
    response_type: ResponseType = "json"
    proxy: ProxyConfig | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def _encode_json_body(params: Mapping[str, Any]) -> bytes:
    try:
        return json.dumps(params, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Request body is not JSON serializable: {e}") from e


class RequestConfigBuilder:
    """Compose base URL, authentication and proxy settings into request descriptors."""

    def __init__(self, config: ClientConfig, auth_strategy: AuthStrategy | None = None) -> None:
        self._config = config
        self._auth_strategy = auth_strategy or AuthStrategy(config.auth)

        self._default_headers = {"User-Agent": config.user_agent}
        if config.basic_auth is not None:
            self._default_headers.update(compute_basic_auth_header(config.basic_auth))

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def auth_strategy(self) -> AuthStrategy:
        return self._auth_strategy

    def build_url(self, path: str) -> str:
        """Join the base URL and a path with exactly one slash."""
        return f"{self._config.base_url}/{path.lstrip('/')}"

    async def build(
        self,
        method: HttpMethod | str,
        path: str,
        params: Mapping[str, Any] | FormData,
        *,
        response_type: ResponseType = "json",
    ) -> RequestDescriptor:
        """Build the descriptor for one call.

        Args:
            method: HTTP verb (case-insensitive)
            path: Path below the base URL, placeholders already substituted
            params: Encoded parameters, or a FormData payload for multipart uploads
            response_type: ``"arraybuffer"`` when the response is binary

        Returns:
            RequestDescriptor ready to be executed by a transport

        Raises:
            EncodingError: If the payload cannot be placed or serialized
        """
        http_method = method.upper()
        if http_method not in QUERY_METHODS and http_method not in BODY_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        url = self.build_url(path)
        headers = dict(self._default_headers)
        headers.update(await self._auth_strategy.headers())

        body = None
        if http_method in QUERY_METHODS:
            if isinstance(params, FormData):
                raise EncodingError(f"{http_method} requests cannot carry a multipart body")
            if params:
                url = str(httpx.URL(url, params=dict(params)))
        elif isinstance(params, FormData):
            body, headers["Content-Type"] = params.encode()
        elif isinstance(params, Mapping):
            body = _encode_json_body(params)
            headers["Content-Type"] = "application/json"
        else:
            raise EncodingError(f"Unsupported request payload type: {type(params).__name__}")

        logger.debug(f"Built request {http_method} {url}")
        return RequestDescriptor(
            method=http_method,
            url=url,
            headers=headers,
            body=body,
            response_type=response_type,
            proxy=self._config.proxy,
            timeout=self._config.timeout,
        )
