import pytest

import holidayapi
from holidayapi import BuildableRequest, HolidayAPI
from holidayapi.adapters.builders import APIRequest, encode_value

from conftest import KEY


def _api(settings) -> HolidayAPI:
    return HolidayAPI.new(KEY, settings=settings)


def test_encode_value():
    assert encode_value(True) == "true"
    assert encode_value(False) == "false"
    assert encode_value(2021) == "2021"
    assert encode_value("jp") == "jp"


def test_setter_order_does_not_matter(settings):
    holidays = _api(settings).holidays("us", 2020)
    assert holidays.public(True).pretty(True).parameters == holidays.pretty(True).public(True).parameters
    assert holidays.public(True).pretty(True) == holidays.pretty(True).public(True)


def test_setters_return_new_builders(settings):
    base = _api(settings).holidays("us", 2020)
    december = base.month(12)

    assert base.parameters == {"country": "us", "year": "2020"}
    assert december.parameters == {"country": "us", "year": "2020", "month": "12"}
    assert december is not base


def test_branches_do_not_leak_into_each_other(settings):
    base = _api(settings).countries().public(True)
    left = base.search("united")
    right = base.country("us")

    assert "country" not in left.parameters
    assert "search" not in right.parameters


def test_setter_overwrites_previous_value(settings):
    request = _api(settings).holidays("us", 2020).month(1).month(12).public(True).public(False)
    assert request.parameters["month"] == "12"
    assert request.parameters["public"] == "false"


def test_parameters_is_a_snapshot(settings):
    request = _api(settings).languages()
    snapshot = request.parameters
    snapshot["search"] = "x"
    assert request.parameters == {}


def test_holidays_parameters(settings):
    request = (
        _api(settings)
        .holidays("jp", 2021)
        .month(12)
        .day(25)
        .public(True)
        .subdivisions(True)
        .search("christmas")
        .language("en")
        .previous(False)
        .upcoming(True)
        .pretty(True)
    )
    assert request.parameters == {
        "country": "jp",
        "year": "2021",
        "month": "12",
        "day": "25",
        "public": "true",
        "subdivisions": "true",
        "search": "christmas",
        "language": "en",
        "previous": "false",
        "upcoming": "true",
        "pretty": "true",
    }


def test_previous_and_upcoming_are_not_checked_locally(settings):
    request = _api(settings).holidays("us", 2020).previous(True).upcoming(True)
    assert request.parameters["previous"] == request.parameters["upcoming"] == "true"


def test_countries_parameters(settings):
    request = _api(settings).countries().country("us").search("united").public(True).pretty(False)
    assert request.parameters == {
        "country": "us",
        "search": "united",
        "public": "true",
        "pretty": "false",
    }


def test_workday_parameters(settings):
    request = _api(settings).workday("us", "2021-07-01", 10).pretty(True)
    assert request.parameters == {
        "country": "us",
        "start": "2021-07-01",
        "days": "10",
        "pretty": "true",
    }


def test_workdays_parameters(settings):
    request = _api(settings).workdays("us", "2021-07-01", "2021-07-31")
    assert request.parameters == {"country": "us", "start": "2021-07-01", "end": "2021-07-31"}


def test_languages_parameters(settings):
    request = _api(settings).languages().language("es").search("span")
    assert request.parameters == {"language": "es", "search": "span"}


def test_every_builder_is_buildable(settings):
    api = _api(settings)
    for request in (
        api.countries(),
        api.holidays("us", 2020),
        api.workday("us", "2020-01-01", 1),
        api.workdays("us", "2020-01-01", "2020-01-31"),
        api.languages(),
    ):
        assert isinstance(request, BuildableRequest)


def test_builders_of_different_endpoints_are_not_equal(settings):
    api = _api(settings)
    assert api.countries() != api.languages()


def test_base_request_cannot_be_instantiated(settings):
    with pytest.raises(TypeError):
        APIRequest(_api(settings))  # type: ignore[abstract]


def test_base_request_is_not_exported():
    assert "APIRequest" not in holidayapi.__all__
