"""Token coercion for the NDBC realtime text feed."""

import math
from datetime import UTC, datetime

MISSING = "MM"

COMPASS_DEGREES: dict[str, float] = {
    "N": 0.0, "NNE": 22.5, "NE": 45.0, "ENE": 67.5,
    "E": 90.0, "ESE": 112.5, "SE": 135.0, "SSE": 157.5,
    "S": 180.0, "SSW": 202.5, "SW": 225.0, "WSW": 247.5,
    "W": 270.0, "WNW": 292.5, "NW": 315.0, "NNW": 337.5,
}


def coerce_float(token: str | None) -> float | None:
    """Parse a numeric token. ``MM``, None and garbage all become None."""
    if token is None or token == MISSING:
        return None
    try:
        value = float(token)
    except (ValueError, TypeError):
        return None
    if not math.isfinite(value):
        return None
    return value


def coerce_direction(token: str | None) -> float | None:
    """Parse a direction given either in degrees or as a compass point."""
    value = coerce_float(token)
    if value is not None:
        return value
    if token is None:
        return None
    return COMPASS_DEGREES.get(token.strip().upper())


def coerce_timestamp(
    year: str | None,
    month: str | None,
    day: str | None,
    hour: str | None,
    minute: str | None,
) -> datetime | None:
    """Combine the five leading feed columns into a UTC instant.

    Month is 1-indexed. Returns None when any part is missing or the
    resulting calendar date does not exist.
    """
    parts = (year, month, day, hour, minute)
    if any(p is None or p == "" for p in parts):
        return None
    try:
        y, mo, d, h, mi = (int(p) for p in parts)
        return datetime(y, mo, d, h, mi, tzinfo=UTC)
    except (ValueError, TypeError, OverflowError):
        return None
