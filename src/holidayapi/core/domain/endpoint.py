"""Endpoints exposed by the Holiday API."""

from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    """Closed set of endpoints; the value is the URL path segment."""

    COUNTRIES = "countries"
    HOLIDAYS = "holidays"
    LANGUAGES = "languages"
    WORKDAY = "workday"
    WORKDAYS = "workdays"

    @property
    def path(self) -> str:
        return self.value
