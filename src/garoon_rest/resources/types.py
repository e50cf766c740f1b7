"""Parameter and response shapes of the Garoon REST API.

Keys use the API's camelCase names since the dictionaries are sent as is.
Optional members may be left out entirely; a member set to None is dropped
before the request is sent.
"""

from typing import Any, Literal, NotRequired, TypedDict

Id = int | str


class OrderBy(TypedDict):
    property: str
    order: Literal["asc", "desc"]


class DateTimeWithZone(TypedDict):
    dateTime: str
    timeZone: str


class Attendee(TypedDict, total=False):
    type: Literal["ORGANIZATION", "USER"]
    id: Id
    code: str


class Facility(TypedDict, total=False):
    id: Id
    code: str


class Watcher(TypedDict, total=False):
    type: Literal["ORGANIZATION", "USER", "ROLE"]
    id: Id
    code: str


class Attachment(TypedDict):
    name: str
    content: str  # base64
    contentType: NotRequired[str]


class CompanyInfo(TypedDict, total=False):
    name: str
    zipCode: str
    address: str
    route: str
    routeTime: str
    routeFare: str
    phone: str


class EventInput(TypedDict, total=False):
    eventType: Literal["REGULAR", "ALL_DAY"]
    eventMenu: str
    subject: str
    notes: str
    start: DateTimeWithZone
    end: DateTimeWithZone
    isAllDay: bool
    isStartOnly: bool
    attendees: list[Attendee]
    facilities: list[Facility]
    facilityUsingPurpose: str
    companyInfo: CompanyInfo
    attachments: list[Attachment]
    visibilityType: Literal["PUBLIC", "PRIVATE", "SET_PRIVATE_WATCHERS"]
    useAttendanceCheck: bool
    watchers: list[Watcher]
    additionalItems: dict[str, dict[str, Any]]


class IdParams(TypedDict):
    id: Id


class UpdateEventParams(TypedDict):
    id: Id
    event: EventInput


class GetEventsParams(TypedDict, total=False):
    limit: int
    offset: int
    fields: list[str]
    orderBy: OrderBy
    rangeStart: str
    rangeEnd: str
    target: Id
    targetType: Literal["user", "organization", "facility"]
    keyword: str
    excludeFromSearch: list[Literal["subject", "company", "notes", "comments"]]


class TimeRange(TypedDict):
    start: str
    end: str


class SearchAvailableTimesParams(TypedDict, total=False):
    timeRanges: list[TimeRange]
    timeInterval: int
    attendees: list[Attendee]
    facilities: list[Facility]
    facilitySearchCondition: Literal["AND", "OR"]


class PageParams(TypedDict, total=False):
    limit: int
    offset: int


class NameSearchParams(PageParams, total=False):
    name: str


class FacilityGroupFacilitiesParams(PageParams):
    id: Id


class UserCodeParams(TypedDict):
    code: str


class PresenceStatus(TypedDict):
    code: str


class UpdatePresenceParams(TypedDict):
    id: Id
    status: NotRequired[PresenceStatus]
    notes: NotRequired[str]


class EventsResponse(TypedDict):
    events: list[dict[str, Any]]
    hasNext: bool


class FacilitiesResponse(TypedDict):
    facilities: list[dict[str, Any]]
    hasNext: bool


class FacilityGroupsResponse(TypedDict):
    facilityGroups: list[dict[str, Any]]
    hasNext: bool


class AvailableTimesResponse(TypedDict):
    availableTimes: list[dict[str, Any]]
