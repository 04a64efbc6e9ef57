"""Buoy observation data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any, TypeAlias

from marinewatch.models.common import format_instant

# Attribute name -> wire key, in feed column order after the timestamp.
MEASUREMENT_FIELDS: dict[str, str] = {
    "wind_direction": "windDirection",
    "wind_speed": "windSpeed",
    "gust_speed": "gustSpeed",
    "wave_height": "waveHeight",
    "dominant_wave_period": "dominantWavePeriod",
    "average_wave_period": "averageWavePeriod",
    "mean_wave_direction": "meanWaveDirection",
    "pressure": "pressure",
    "air_temperature": "airTemperature",
    "water_temperature": "waterTemperature",
    "dew_point": "dewPoint",
    "visibility": "visibility",
    "pressure_tendency": "pressureTendency",
    "tide": "tide",
}

HISTORICAL_FIELDS: tuple[str, ...] = (
    "wind_direction",
    "wind_speed",
    "wave_height",
    "dominant_wave_period",
    "air_temperature",
    "water_temperature",
)


@dataclass(frozen=True)
class ObservationRecord:
    timestamp: datetime | None = None
    wind_direction: float | None = None  # degrees true
    wind_speed: float | None = None  # m/s
    gust_speed: float | None = None
    wave_height: float | None = None  # m
    dominant_wave_period: float | None = None  # s
    average_wave_period: float | None = None
    mean_wave_direction: float | None = None
    pressure: float | None = None  # hPa
    air_temperature: float | None = None  # degC
    water_temperature: float | None = None
    dew_point: float | None = None
    visibility: float | None = None  # nmi
    pressure_tendency: float | None = None
    tide: float | None = None  # ft

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"timestamp": format_instant(self.timestamp)}
        for attr, key in MEASUREMENT_FIELDS.items():
            data[key] = getattr(self, attr)
        return data


@dataclass(frozen=True)
class HistoricalPoint:
    timestamp: datetime | None
    wind_direction: float | None
    wind_speed: float | None
    wave_height: float | None
    dominant_wave_period: float | None
    air_temperature: float | None
    water_temperature: float | None

    @classmethod
    def from_record(cls, record: ObservationRecord) -> "HistoricalPoint":
        return cls(
            timestamp=record.timestamp,
            **{attr: getattr(record, attr) for attr in HISTORICAL_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"timestamp": format_instant(self.timestamp)}
        for attr in HISTORICAL_FIELDS:
            data[MEASUREMENT_FIELDS[attr]] = getattr(self, attr)
        return data


class SkipReason(StrEnum):
    TOO_FEW_COLUMNS = "too_few_columns"
    NO_TIMESTAMP = "no_timestamp"


@dataclass(frozen=True)
class SkippedLine:
    """Marker for a data line that was dropped instead of parsed."""

    raw: str
    reason: SkipReason


LineResult: TypeAlias = ObservationRecord | SkippedLine


@dataclass(frozen=True)
class ObservationSnapshot:
    latest: ObservationRecord
    historical: tuple[HistoricalPoint, ...]
    condition_score: int
    last_updated: datetime
    skipped_lines: int = field(default=0, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {
            "latest": self.latest.to_dict(),
            "historical": [p.to_dict() for p in self.historical],
            "conditionScore": self.condition_score,
            "lastUpdated": format_instant(self.last_updated),
        }
