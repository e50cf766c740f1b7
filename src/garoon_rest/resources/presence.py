"""Presence resource: a user's current status."""

from typing import Any
from urllib.parse import quote

from garoon_rest.params import build_path, encode_params, pop_path_params
from garoon_rest.resources.types import IdParams, UpdatePresenceParams, UserCodeParams
from garoon_rest.transport.http import HttpClient

PRESENCE_BY_ID_PATH = "/api/v1/presence/users/{id}"
PRESENCE_BY_CODE_PATH = "/api/v1/presence/users/code/{code}"


class PresenceClient:
    """Operations on ``/api/v1/presence``."""

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def get_presence_by_user_id(self, params: IdParams) -> dict[str, Any]:
        path_values, _ = pop_path_params(params, "id")
        return await self._client.get(build_path(PRESENCE_BY_ID_PATH, **path_values), {})

    async def get_presence_by_user_code(self, params: UserCodeParams) -> dict[str, Any]:
        path_values, _ = pop_path_params(params, "code")
        # Login names may contain characters like '@' or '/'
        code = quote(str(path_values["code"]), safe="")
        return await self._client.get(build_path(PRESENCE_BY_CODE_PATH, code=code), {})

    async def update_presence_by_user_id(self, params: UpdatePresenceParams) -> dict[str, Any]:
        path_values, rest = pop_path_params(params, "id")
        return await self._client.patch(build_path(PRESENCE_BY_ID_PATH, **path_values), encode_params(rest))
