"""Base resource: users and organizations."""

from typing import Any

from garoon_rest.params import encode_params
from garoon_rest.resources.types import NameSearchParams
from garoon_rest.transport.http import HttpClient

USERS_PATH = "/api/v1/base/users"
ORGANIZATIONS_PATH = "/api/v1/base/organizations"


class BaseClient:
    """Operations on ``/api/v1/base``."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def get_users(self, params: NameSearchParams | None = None) -> dict[str, Any]:
        return await self._client.get(USERS_PATH, encode_params(params))

    async def get_organizations(self, params: NameSearchParams | None = None) -> dict[str, Any]:
        return await self._client.get(ORGANIZATIONS_PATH, encode_params(params))
