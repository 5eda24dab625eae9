"""Unofficial async client for Holiday API (https://holidayapi.com/docs)."""

from __future__ import annotations

import logging

from holidayapi.adapters.builders import (
    CountriesRequest,
    HolidaysRequest,
    LanguagesRequest,
    WorkdayRequest,
    WorkdaysRequest,
)
from holidayapi.client import HolidayAPI
from holidayapi.core.config import AppSettings
from holidayapi.core.domain import (
    CountriesResponse,
    Country,
    Endpoint,
    Holiday,
    HolidaysResponse,
    Language,
    LanguagesResponse,
    Workday,
    WorkdayResponse,
    WorkdaysResponse,
)
from holidayapi.core.errors import (
    DecodeError,
    HolidayAPIError,
    InvalidKeyFormat,
    InvalidOrExpiredKey,
    InvalidVersion,
    TransportError,
)
from holidayapi.core.interfaces import BuildableRequest
from holidayapi.core.validation import SUPPORTED_VERSIONS, validate_key, validate_version

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AppSettings",
    "BuildableRequest",
    "CountriesRequest",
    "CountriesResponse",
    "Country",
    "DecodeError",
    "Endpoint",
    "Holiday",
    "HolidayAPI",
    "HolidayAPIError",
    "HolidaysRequest",
    "HolidaysResponse",
    "InvalidKeyFormat",
    "InvalidOrExpiredKey",
    "InvalidVersion",
    "Language",
    "LanguagesRequest",
    "LanguagesResponse",
    "SUPPORTED_VERSIONS",
    "TransportError",
    "Workday",
    "WorkdayRequest",
    "WorkdayResponse",
    "WorkdaysRequest",
    "WorkdaysResponse",
    "validate_key",
    "validate_version",
]
