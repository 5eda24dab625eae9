"""Request builders, one per endpoint.

Every setter returns a *new* builder with the merged parameters; the builder it
was called on is left untouched, so partially configured requests can be
shared and branched freely:

    base = api.holidays("us", 2024).public(True)
    december = base.month(12)
    upcoming = base.upcoming(True)

Some parameter combinations are rejected by the API itself and are not checked
here: `previous` and `upcoming` are mutually exclusive, and `day` needs `month`.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Generic, Mapping, TypeVar

from pydantic import ValidationError

from holidayapi.adapters.http_client import dispatch
from holidayapi.core.domain.endpoint import Endpoint
from holidayapi.core.domain.models import (
    CountriesResponse,
    Country,
    Holiday,
    HolidaysResponse,
    Language,
    LanguagesResponse,
    ResponseEnvelope,
    Workday,
    WorkdayResponse,
    WorkdaysResponse,
)
from holidayapi.core.errors import DecodeError

if TYPE_CHECKING:
    from holidayapi.client import HolidayAPI

ResponseT = TypeVar("ResponseT", bound=ResponseEnvelope)
PayloadT = TypeVar("PayloadT")
RequestT = TypeVar("RequestT", bound="APIRequest")


def encode_value(value: str | int | bool) -> str:
    """Query-string form of a parameter value (`true`/`false` for booleans)."""

    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class APIRequest(ABC, Generic[ResponseT, PayloadT]):
    """Parameter accumulation, dispatch and decoding shared by all builders."""

    endpoint: ClassVar[Endpoint]
    response_model: ClassVar[type[ResponseEnvelope]]

    def __init__(self, api: HolidayAPI, parameters: Mapping[str, str] | None = None) -> None:
        self._api = api
        self._parameters: dict[str, str] = dict(parameters or {})

    @property
    def api(self) -> HolidayAPI:
        return self._api

    @property
    def parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._parameters!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._api is other._api and self._parameters == other._parameters

    def _with(self: RequestT, name: str, value: str | int | bool) -> RequestT:
        clone = copy.copy(self)
        clone._parameters = {**self._parameters, name: encode_value(value)}
        return clone

    def pretty(self: RequestT, pretty: bool) -> RequestT:
        return self._with("pretty", pretty)

    async def get_raw(self) -> str:
        return await dispatch(self._api, self.endpoint, self._parameters)

    def decode(self, text: str) -> ResponseT:
        """Parse a body returned by this endpoint into its envelope model."""

        try:
            return self.response_model.model_validate_json(text)  # type: ignore[return-value]
        except ValidationError as exc:
            raise DecodeError(
                f"Could not decode {self.endpoint.path} response: "
                f"{exc.error_count()} error(s), first: {exc.errors()[0]['msg']}",
                model=self.response_model.__name__,
            ) from exc

    async def get_full(self) -> ResponseT:
        return self.decode(await self.get_raw())

    async def get(self) -> PayloadT:
        return self.payload(await self.get_full())

    @abstractmethod
    def payload(self, response: ResponseT) -> PayloadT:
        """Primary field of the decoded envelope."""


class CountriesRequest(APIRequest[CountriesResponse, list[Country]]):
    endpoint = Endpoint.COUNTRIES
    response_model = CountriesResponse

    def country(self, country: str) -> CountriesRequest:
        return self._with("country", country)

    def search(self, search: str) -> CountriesRequest:
        return self._with("search", search)

    def public(self, public: bool) -> CountriesRequest:
        return self._with("public", public)

    def payload(self, response: CountriesResponse) -> list[Country]:
        return response.countries


class HolidaysRequest(APIRequest[HolidaysResponse, list[Holiday]]):
    """Holidays of a country for a given year.

    `country` accepts ISO 3166-1 alpha-2/alpha-3 codes and ISO 3166-2
    subdivision codes (e.g. `us`, `usa`, `us-ca`).
    """

    endpoint = Endpoint.HOLIDAYS
    response_model = HolidaysResponse

    def __init__(self, api: HolidayAPI, country: str, year: int) -> None:
        super().__init__(api, {"country": country, "year": encode_value(year)})

    def month(self, month: int) -> HolidaysRequest:
        return self._with("month", month)

    def day(self, day: int) -> HolidaysRequest:
        return self._with("day", day)

    def public(self, public: bool) -> HolidaysRequest:
        return self._with("public", public)

    def subdivisions(self, subdivisions: bool) -> HolidaysRequest:
        return self._with("subdivisions", subdivisions)

    def search(self, search: str) -> HolidaysRequest:
        return self._with("search", search)

    def language(self, language: str) -> HolidaysRequest:
        return self._with("language", language)

    def previous(self, previous: bool) -> HolidaysRequest:
        return self._with("previous", previous)

    def upcoming(self, upcoming: bool) -> HolidaysRequest:
        return self._with("upcoming", upcoming)

    def payload(self, response: HolidaysResponse) -> list[Holiday]:
        return response.holidays


class WorkdayRequest(APIRequest[WorkdayResponse, Workday | None]):
    """Date that is `days` business days away from `start` (YYYY-MM-DD)."""

    endpoint = Endpoint.WORKDAY
    response_model = WorkdayResponse

    def __init__(self, api: HolidayAPI, country: str, start: str, days: int) -> None:
        super().__init__(
            api,
            {"country": country, "start": start, "days": encode_value(days)},
        )

    def payload(self, response: WorkdayResponse) -> Workday | None:
        return response.workday


class WorkdaysRequest(APIRequest[WorkdaysResponse, int | None]):
    """Number of business days between `start` and `end` (YYYY-MM-DD)."""

    endpoint = Endpoint.WORKDAYS
    response_model = WorkdaysResponse

    def __init__(self, api: HolidayAPI, country: str, start: str, end: str) -> None:
        super().__init__(api, {"country": country, "start": start, "end": end})

    def payload(self, response: WorkdaysResponse) -> int | None:
        return response.workdays


class LanguagesRequest(APIRequest[LanguagesResponse, list[Language]]):
    endpoint = Endpoint.LANGUAGES
    response_model = LanguagesResponse

    def language(self, language: str) -> LanguagesRequest:
        return self._with("language", language)

    def search(self, search: str) -> LanguagesRequest:
        return self._with("search", search)

    def payload(self, response: LanguagesResponse) -> list[Language]:
        return response.languages
