from __future__ import annotations

from typing import Callable

import httpx
import pytest

from holidayapi import AppSettings, HolidayAPI

KEY = "daaaaaab-aaaa-aaaa-aaaa-2aaaada37e14"

QUOTA = {"available": 9998, "used": 2, "resets": "2021-12-01 00:00:00"}


def envelope(**payload) -> dict:
    return {"status": 200, "requests": dict(QUOTA), **payload}


class Recorder:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: str | dict = "") -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, dict):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def make_api(settings) -> Callable[..., tuple[HolidayAPI, Recorder]]:
    def _make(status_code: int = 200, body: str | dict = "") -> tuple[HolidayAPI, Recorder]:
        recorder = Recorder(status_code, body)
        api = HolidayAPI.new(KEY, settings=settings, transport=httpx.MockTransport(recorder))
        return api, recorder

    return _make
