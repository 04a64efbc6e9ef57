"""Tests for model serialization and immutability."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from marinewatch.models.common import format_instant
from marinewatch.models.forecast import CurrentConditions, ForecastPeriod
from marinewatch.models.observation import HistoricalPoint, ObservationRecord


class TestFormatInstant:
    def test_millisecond_z_format(self):
        assert format_instant(datetime(2024, 1, 15, 12, 0, tzinfo=UTC)) == "2024-01-15T12:00:00.000Z"

    def test_truncates_to_milliseconds(self):
        dt = datetime(2024, 1, 15, 12, 0, 1, 234567, tzinfo=UTC)
        assert format_instant(dt) == "2024-01-15T12:00:01.234Z"

    def test_converts_to_utc(self):
        dt = datetime(2024, 1, 15, 7, 0, tzinfo=timezone(timedelta(hours=-5)))
        assert format_instant(dt) == "2024-01-15T12:00:00.000Z"

    def test_none(self):
        assert format_instant(None) is None


class TestObservationRecord:
    def test_to_dict_camel_case(self):
        record = ObservationRecord(
            timestamp=datetime(2024, 1, 15, 12, 0, tzinfo=UTC),
            wind_direction=180.0,
            dominant_wave_period=8.0,
        )
        data = record.to_dict()
        assert data["timestamp"] == "2024-01-15T12:00:00.000Z"
        assert data["windDirection"] == 180.0
        assert data["dominantWavePeriod"] == 8.0
        assert data["tide"] is None
        assert len(data) == 15

    def test_frozen(self):
        record = ObservationRecord()
        with pytest.raises(AttributeError):
            record.wind_speed = 3.0  # type: ignore[misc]

    def test_historical_projection(self):
        record = ObservationRecord(wave_height=1.2, gust_speed=12.0, air_temperature=15.0)
        point = HistoricalPoint.from_record(record)
        assert point.wave_height == 1.2
        assert point.air_temperature == 15.0
        assert not hasattr(point, "gust_speed")


class TestForecastModels:
    def test_current_conditions_from_period(self):
        period = ForecastPeriod(date="TODAY", wind="N winds 5 kt", seas="Unknown", weather=None)
        current = CurrentConditions.from_period(period)
        assert current.to_dict() == {"wind": "N winds 5 kt", "seas": "Unknown", "weather": None}
