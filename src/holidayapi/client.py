"""Client handle for the Holiday API.

`HolidayAPI` holds the versioned base URL and the validated key. It is
read-only after construction and shared (not copied) by every builder it
creates. Construction never touches the network.
"""

from __future__ import annotations

import httpx

from holidayapi.adapters.builders import (
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
    WorkdaysRequest,
)
from holidayapi.core.config import AppSettings
from holidayapi.core.errors import mask_key
from holidayapi.core.validation import DEFAULT_VERSION, validate_key, validate_version


class HolidayAPI:
    """Entry point: validates credentials and creates request builders.

    Examples:

        api = HolidayAPI.new("00000000-0000-0000-0000-000000000000")
        holidays = await api.holidays("us", 2020).month(12).upcoming(True).get()
    """

    __slots__ = ("_base_url", "_key", "_settings", "_transport")

    def __init__(
        self,
        key: str,
        version: int = DEFAULT_VERSION,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        validate_key(key)
        validate_version(version)

        # Only `from_settings` reads the environment; plain construction uses defaults.
        self._settings = settings or AppSettings.model_construct()
        self._base_url = f"https://{self._settings.host}/v{version}/"
        self._key = key
        self._transport = transport

    @classmethod
    def new(
        cls,
        key: str,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HolidayAPI:
        """Handle for the default API version.

        Raises `InvalidKeyFormat` if the key is not plausibly a valid one.
        """

        return cls(key, DEFAULT_VERSION, settings=settings, transport=transport)

    @classmethod
    def with_version(
        cls,
        key: str,
        version: int,
        *,
        settings: AppSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HolidayAPI:
        """Handle for an explicit API version.

        Raises `InvalidKeyFormat` or `InvalidVersion`.
        """

        return cls(key, version, settings=settings, transport=transport)

    @classmethod
    def from_settings(
        cls,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HolidayAPI:
        """Handle built from `HOLIDAYAPI_KEY` / `HOLIDAYAPI_VERSION` (or `.env`)."""

        settings = settings or AppSettings()
        return cls(
            settings.key,  # type: ignore[arg-type]
            settings.version,
            settings=settings,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def key(self) -> str:
        return self._key

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def transport(self) -> httpx.AsyncBaseTransport | None:
        return self._transport

    def __repr__(self) -> str:
        return f"HolidayAPI(base_url={self._base_url!r}, key={mask_key(self._key)!r})"

    def countries(self) -> CountriesRequest:
        """Minimal `countries` request; refine with `.search(...)`, `.public(...)`, ..."""

        return CountriesRequest(self)

    def holidays(self, country: str, year: int) -> HolidaysRequest:
        """Minimal `holidays` request; refine with `.month(...)`, `.upcoming(...)`, ..."""

        return HolidaysRequest(self, country, year)

    def workday(self, country: str, start: str, days: int) -> WorkdayRequest:
        return WorkdayRequest(self, country, start, days)

    def workdays(self, country: str, start: str, end: str) -> WorkdaysRequest:
        return WorkdaysRequest(self, country, start, end)

    def languages(self) -> LanguagesRequest:
        return LanguagesRequest(self)
