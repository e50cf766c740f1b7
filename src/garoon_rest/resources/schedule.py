"""Schedule resource: events, available time search, facilities."""

from typing import Any

from garoon_rest.params import build_path, encode_params, pop_path_params
from garoon_rest.resources.types import (
    AvailableTimesResponse,
    EventInput,
    EventsResponse,
    FacilitiesResponse,
    FacilityGroupFacilitiesParams,
    FacilityGroupsResponse,
    GetEventsParams,
    IdParams,
    NameSearchParams,
    PageParams,
    SearchAvailableTimesParams,
    UpdateEventParams,
)
from garoon_rest.transport.http import HttpClient

EVENTS_PATH = "/api/v1/schedule/events"
EVENT_PATH = "/api/v1/schedule/events/{id}"
SEARCH_AVAILABLE_TIMES_PATH = "/api/v1/schedule/searchAvailableTimes"
FACILITIES_PATH = "/api/v1/schedule/facilities"
FACILITY_GROUPS_PATH = "/api/v1/schedule/facilityGroups"
FACILITY_GROUP_FACILITIES_PATH = "/api/v1/schedule/facilityGroups/{id}/facilities"


class ScheduleClient:
    """Operations on ``/api/v1/schedule``.

    Example:
        ```python
        events = await client.schedule.get_events(
            {
                "limit": 100,
                "fields": ["id", "subject"],
                "orderBy": {"property": "createdAt", "order": "asc"},
            }
        )
        ```
    """

    def __init__(self, client: HttpClient) -> None:
        self._client = client

    async def get_event(self, params: IdParams) -> dict[str, Any]:
        path_values, _ = pop_path_params(params, "id")
        return await self._client.get(build_path(EVENT_PATH, **path_values), {})

    async def get_events(self, params: GetEventsParams | None = None) -> EventsResponse:
        """List events.

        ``fields`` and ``excludeFromSearch`` are sent comma separated and
        ``orderBy`` as ``"<property> <order>"``.
        """
        data = encode_params(params, list_keys=("fields", "excludeFromSearch"), order_keys=("orderBy",))
        return await self._client.get(EVENTS_PATH, data)

    async def add_event(self, params: EventInput) -> dict[str, Any]:
        return await self._client.post(EVENTS_PATH, encode_params(params))

    async def update_event(self, params: UpdateEventParams) -> dict[str, Any]:
        path_values, rest = pop_path_params(params, "id")
        return await self._client.patch(build_path(EVENT_PATH, **path_values), encode_params(rest.get("event")))

    async def delete_event(self, params: IdParams) -> None:
        path_values, _ = pop_path_params(params, "id")
        await self._client.delete(build_path(EVENT_PATH, **path_values), {})

    async def search_available_times(self, params: SearchAvailableTimesParams) -> AvailableTimesResponse:
        return await self._client.post(SEARCH_AVAILABLE_TIMES_PATH, encode_params(params))

    async def get_facilities(self, params: NameSearchParams | None = None) -> FacilitiesResponse:
        return await self._client.get(FACILITIES_PATH, encode_params(params))

    async def get_facility_groups(self, params: PageParams | None = None) -> FacilityGroupsResponse:
        return await self._client.get(FACILITY_GROUPS_PATH, encode_params(params))

    async def get_facilities_by_facility_group_id(self, params: FacilityGroupFacilitiesParams) -> FacilitiesResponse:
        path_values, rest = pop_path_params(params, "id")
        return await self._client.get(build_path(FACILITY_GROUP_FACILITIES_PATH, **path_values), encode_params(rest))
