"""Marine zone forecast data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from marinewatch.models.common import format_instant

SEAS_UNKNOWN = "Unknown"


@dataclass(frozen=True)
class ForecastPeriod:
    date: str  # TODAY, TONIGHT, SAT, SAT NIGHT...
    wind: str
    seas: str
    weather: str | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "wind": self.wind,
            "seas": self.seas,
            "weather": self.weather,
        }


@dataclass(frozen=True)
class CurrentConditions:
    wind: str
    seas: str
    weather: str | None

    @classmethod
    def from_period(cls, period: ForecastPeriod) -> "CurrentConditions":
        return cls(wind=period.wind, seas=period.seas, weather=period.weather)

    def to_dict(self) -> dict[str, Any]:
        return {"wind": self.wind, "seas": self.seas, "weather": self.weather}


@dataclass(frozen=True)
class ForecastBundle:
    timestamp: datetime
    raw_text: str
    current_conditions: CurrentConditions | None
    forecast: tuple[ForecastPeriod, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": format_instant(self.timestamp),
            "rawText": self.raw_text,
            "currentConditions": (
                self.current_conditions.to_dict()
                if self.current_conditions is not None
                else None
            ),
            "forecast": [p.to_dict() for p in self.forecast],
        }
