"""Per-line parser for NDBC standard meteorological realtime records."""

from marinewatch.ingest.coercion import coerce_direction, coerce_float, coerce_timestamp
from marinewatch.models.observation import (
    LineResult,
    ObservationRecord,
    SkippedLine,
    SkipReason,
)

MIN_COLUMNS = 15

# Columns 6..14 are mandatory, 15..18 appear only on full-width lines.
_MANDATORY_COLUMNS = (
    "wind_speed",
    "gust_speed",
    "wave_height",
    "dominant_wave_period",
    "average_wave_period",
    "mean_wave_direction",
    "pressure",
    "air_temperature",
    "water_temperature",
)
_OPTIONAL_COLUMNS = ("dew_point", "visibility", "pressure_tendency", "tide")


def tokenize(line: str) -> list[str]:
    return line.split()


def parse_line(line: str) -> LineResult:
    """Map one whitespace-delimited feed line to an ObservationRecord.

    Short lines and lines without a derivable timestamp come back as a
    SkippedLine rather than raising, so callers can drop them.
    """
    columns = tokenize(line)
    if len(columns) < MIN_COLUMNS:
        return SkippedLine(raw=line, reason=SkipReason.TOO_FEW_COLUMNS)

    timestamp = coerce_timestamp(*columns[0:5])
    if timestamp is None:
        return SkippedLine(raw=line, reason=SkipReason.NO_TIMESTAMP)

    values: dict[str, float | None] = {}
    for offset, name in enumerate(_MANDATORY_COLUMNS, start=6):
        values[name] = coerce_float(columns[offset])
    for offset, name in enumerate(_OPTIONAL_COLUMNS, start=15):
        values[name] = coerce_float(columns[offset]) if offset < len(columns) else None

    return ObservationRecord(
        timestamp=timestamp,
        wind_direction=coerce_direction(columns[5]),
        **values,
    )
