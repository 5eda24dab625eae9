"""Domain types: endpoints and response records."""

from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.domain.models import (
    Codes,
    CountriesResponse,
    Country,
    DayName,
    Holiday,
    HolidaysResponse,
    HolidayWeekday,
    Language,
    LanguagesResponse,
    RequestsQuota,
    ResponseEnvelope,
    Subdivision,
    Workday,
    WorkdayResponse,
    WorkdaysResponse,
)

__all__ = [
    "Codes",
    "CountriesResponse",
    "Country",
    "DayName",
    "Endpoint",
    "Holiday",
    "HolidayWeekday",
    "HolidaysResponse",
    "Language",
    "LanguagesResponse",
    "RequestsQuota",
    "ResponseEnvelope",
    "Subdivision",
    "Workday",
    "WorkdayResponse",
    "WorkdaysResponse",
]
