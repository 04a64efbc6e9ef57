"""Tests for feed token coercion."""

from datetime import UTC, datetime

import pytest

from marinewatch.ingest.coercion import (
    COMPASS_DEGREES,
    coerce_direction,
    coerce_float,
    coerce_timestamp,
)


class TestCoerceFloat:
    def test_missing_sentinel(self):
        assert coerce_float("MM") is None

    def test_none(self):
        assert coerce_float(None) is None

    @pytest.mark.parametrize("token,expected", [
        ("10.5", 10.5),
        ("0", 0.0),
        ("-0.5", -0.5),
        ("1013.2", 1013.2),
        ("99.00", 99.0),
    ])
    def test_numeric(self, token: str, expected: float):
        assert coerce_float(token) == expected

    def test_garbage(self):
        assert coerce_float("abc") is None
        assert coerce_float("") is None

    def test_non_finite_rejected(self):
        assert coerce_float("nan") is None
        assert coerce_float("inf") is None


class TestCoerceDirection:
    def test_numeric_passthrough(self):
        assert coerce_direction("180") == 180.0
        assert coerce_direction("22.5") == 22.5

    def test_idempotent_on_numeric(self):
        first = coerce_direction("247")
        assert coerce_direction(str(first)) == first

    def test_compass_case_insensitive(self):
        assert coerce_direction("SSW") == 202.5
        assert coerce_direction("ssw") == 202.5
        assert coerce_direction("N") == 0.0
        assert coerce_direction("ENE") == 67.5

    def test_full_compass_table(self):
        points = [
            "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
            "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
        ]
        for i, point in enumerate(points):
            assert coerce_direction(point) == i * 22.5
        assert len(COMPASS_DEGREES) == 16

    def test_unknown(self):
        assert coerce_direction("MM") is None
        assert coerce_direction("NORTH") is None
        assert coerce_direction(None) is None


class TestCoerceTimestamp:
    def test_valid(self):
        ts = coerce_timestamp("2024", "01", "15", "12", "00")
        assert ts == datetime(2024, 1, 15, 12, 0, tzinfo=UTC)

    def test_midnight_zero_columns(self):
        ts = coerce_timestamp("2024", "01", "15", "00", "00")
        assert ts == datetime(2024, 1, 15, 0, 0, tzinfo=UTC)

    def test_missing_component(self):
        assert coerce_timestamp("2024", "01", None, "12", "00") is None
        assert coerce_timestamp("2024", "01", "MM", "12", "00") is None

    def test_invalid_calendar_date(self):
        assert coerce_timestamp("2024", "02", "30", "12", "00") is None
        assert coerce_timestamp("2024", "13", "01", "12", "00") is None
        assert coerce_timestamp("2024", "01", "15", "24", "00") is None
