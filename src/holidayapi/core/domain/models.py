"""Response models (Pydantic v2).

- One envelope per endpoint, all sharing the rate-limit/status fields.
- Nested records for compound fields (code triple, subdivisions, weekdays).
- Unknown fields are ignored so additions on the API side do not break decoding.

Note:
- These models describe *what* the API returns, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _Record(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class RequestsQuota(_Record):
    """Rate-limit metadata attached to every response."""

    available: int = Field(..., description="Requests left in the current window.")
    used: int = Field(..., description="Requests consumed in the current window.")
    resets: str = Field(..., description="Timestamp at which the window resets.")


class ResponseEnvelope(_Record):
    """Fields shared by every endpoint response.

    `error` and `warning` are advisory: a 2xx response carrying them still
    decodes, and it is up to the caller to inspect them.
    """

    requests: RequestsQuota
    status: int
    error: str | None = None
    warning: str | None = None


class Codes(_Record):
    alpha_2: str = Field(..., alias="alpha-2")
    alpha_3: str = Field(..., alias="alpha-3")
    numeric: str


class Subdivision(_Record):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)


class Country(_Record):
    code: str
    name: str
    languages: list[str] = Field(default_factory=list)
    codes: Codes
    flag: str
    subdivisions: list[Subdivision] = Field(default_factory=list)


class DayName(_Record):
    """Weekday as returned by the API (`numeric` is 1 = Monday .. 7 = Sunday)."""

    name: str
    numeric: str


class HolidayWeekday(_Record):
    date: DayName
    observed: DayName


class Holiday(_Record):
    name: str
    date: str
    observed: str
    public: bool
    country: str
    uuid: str
    weekday: HolidayWeekday
    subdivisions: list[str] = Field(
        default_factory=list,
        description="Subdivision codes; only sent when `subdivisions=true`.",
    )


class Language(_Record):
    code: str
    name: str


class Workday(_Record):
    date: str
    weekday: DayName


class CountriesResponse(ResponseEnvelope):
    countries: list[Country] = Field(default_factory=list)


class HolidaysResponse(ResponseEnvelope):
    holidays: list[Holiday] = Field(default_factory=list)


class LanguagesResponse(ResponseEnvelope):
    languages: list[Language] = Field(default_factory=list)


class WorkdayResponse(ResponseEnvelope):
    workday: Workday | None = None


class WorkdaysResponse(ResponseEnvelope):
    workdays: int | None = None
