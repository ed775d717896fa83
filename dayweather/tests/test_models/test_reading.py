"""Tests for reading and query models."""

import pytest

from dayweather.models.outcome import (
    EmptyBody,
    FailureKind,
    HttpError,
    ParseError,
    Success,
    TransportError,
    reading_or_none,
)
from dayweather.models.reading import HourlyReading, WeatherQuery


class TestWeatherQuery:
    def test_single_day_window(self):
        q = WeatherQuery(date="2023-01-01", latitude=52.52, longitude=13.41)
        params = q.params()
        assert params["start_date"] == "2023-01-01"
        assert params["end_date"] == "2023-01-01"
        assert params["hourly"] == "temperature_2m"

    def test_date_not_validated(self):
        q = WeatherQuery(date="not-a-date", latitude=0.0, longitude=0.0)
        assert q.params()["start_date"] == "not-a-date"


class TestHourlyReading:
    def test_pairs_positional(self):
        r = HourlyReading(
            time=["2023-01-01T00:00", "2023-01-01T01:00"],
            temperature=[1.5, 2.0],
        )
        assert len(r) == 2
        assert r.pairs() == [("2023-01-01T00:00", 1.5), ("2023-01-01T01:00", 2.0)]

    def test_pairs_mismatch_raises(self):
        r = HourlyReading(time=["2023-01-01T00:00"], temperature=[1.0, 2.0])
        with pytest.raises(ValueError):
            r.pairs()


class TestOutcome:
    def test_success_collapses_to_reading(self):
        r = HourlyReading(time=["t"], temperature=[1.0])
        assert reading_or_none(Success(reading=r)) is r

    @pytest.mark.parametrize(
        "outcome",
        [HttpError(status=500), EmptyBody(), ParseError("bad"), TransportError("down")],
    )
    def test_failures_collapse_to_none(self, outcome):
        assert reading_or_none(outcome) is None

    def test_failure_kinds(self):
        assert HttpError(status=404).kind == FailureKind.HTTP_ERROR
        assert EmptyBody().kind == FailureKind.EMPTY_BODY
        assert ParseError("x").kind == FailureKind.PARSE_ERROR
        assert TransportError("x").kind == FailureKind.TRANSPORT_ERROR
