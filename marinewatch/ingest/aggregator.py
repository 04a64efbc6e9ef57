"""Aggregate parsed buoy records into a display snapshot."""

import logging
import math
from collections import Counter
from dataclasses import fields, replace
from datetime import datetime

from marinewatch.ingest.observation_parser import parse_line
from marinewatch.models.common import utc_now
from marinewatch.models.errors import MissingHeaderError, NoValidRecordsError
from marinewatch.models.observation import (
    HistoricalPoint,
    ObservationRecord,
    ObservationSnapshot,
    SkippedLine,
)

logger = logging.getLogger(__name__)

HEADER_MARKER = "#YY"
DEFAULT_HISTORY_SIZE = 12
MAX_WAVE_HEIGHT_M = 5.0
MAX_WIND_SPEED_MS = 25.0
FALLBACK_SCORE = 50


def split_data_lines(raw_text: str) -> list[str]:
    """Return the non-blank lines that follow the ``#YY`` header line.

    Further ``#`` lines after it (the units row) are dropped as well.
    """
    lines = [line for line in raw_text.splitlines() if line.strip()]
    for index, line in enumerate(lines):
        if HEADER_MARKER in line:
            return [data for data in lines[index + 1:] if not data.lstrip().startswith("#")]
    logger.error(
        "No %s header in observation feed; first lines: %r",
        HEADER_MARKER, lines[:5],
    )
    raise MissingHeaderError(f"Could not find {HEADER_MARKER} header in observation feed")


def parse_records(data_lines: list[str]) -> tuple[list[ObservationRecord], list[SkippedLine]]:
    records: list[ObservationRecord] = []
    skipped: list[SkippedLine] = []
    for line in data_lines:
        result = parse_line(line)
        if isinstance(result, SkippedLine):
            logger.debug("Skipping line (%s): %r", result.reason, result.raw)
            skipped.append(result)
        else:
            records.append(result)
    return records, skipped


def most_recent_valid(records: list[ObservationRecord], attr: str) -> float | None:
    """First non-None value of ``attr`` in list order."""
    for record in records:
        value = getattr(record, attr)
        if value is not None:
            return value
    return None


def compose_latest(records: list[ObservationRecord]) -> ObservationRecord:
    """Build the composite latest record, each field resolved independently."""
    values = {
        f.name: most_recent_valid(records, f.name)
        for f in fields(ObservationRecord)
        if f.name != "timestamp"
    }
    return ObservationRecord(timestamp=records[0].timestamp, **values)


def normalize(value: float | None, low: float, high: float) -> float:
    """Scale ``value`` onto [0, 1] against ``[low, high]``, clamped."""
    if value is None or math.isnan(value) or low == high:
        return 0.5
    return max(0.0, min(1.0, (value - low) / (high - low)))


def condition_score(
    wave_height: float | None,
    wind_speed: float | None,
    max_wave_height: float = MAX_WAVE_HEIGHT_M,
    max_wind_speed: float = MAX_WIND_SPEED_MS,
) -> int:
    """0-100 badness index: 0 is flat calm, 100 is at or past both ceilings."""
    try:
        wave = normalize(wave_height if wave_height is not None else 0.0, 0.0, max_wave_height)
        wind = normalize(wind_speed if wind_speed is not None else 0.0, 0.0, max_wind_speed)
        badness = (wave + wind) / 2
        score = math.floor(badness * 100 + 0.5)
    except (TypeError, ValueError, OverflowError) as e:
        logger.warning("Condition score failed, using %d: %s", FALLBACK_SCORE, e)
        return FALLBACK_SCORE
    return max(0, min(100, int(score)))


def aggregate(
    raw_text: str,
    now: datetime | None = None,
    history_size: int = DEFAULT_HISTORY_SIZE,
    max_wave_height: float = MAX_WAVE_HEIGHT_M,
    max_wind_speed: float = MAX_WIND_SPEED_MS,
) -> ObservationSnapshot:
    """Parse a full realtime feed into an ObservationSnapshot.

    Raises MissingHeaderError when the header line is absent and
    NoValidRecordsError when no data line survives parsing.
    """
    if now is None:
        now = utc_now()

    data_lines = split_data_lines(raw_text)
    records, skipped = parse_records(data_lines)
    if skipped:
        reasons = Counter(s.reason.value for s in skipped)
        logger.warning(
            "Dropped %d of %d data lines: %s",
            len(skipped), len(data_lines), dict(reasons),
        )

    if not records:
        raise NoValidRecordsError("No valid data points found in observation feed")

    latest = compose_latest(records)
    if latest.timestamp is None:
        logger.warning("No timestamp in latest record, using capture time")
        latest = replace(latest, timestamp=now)

    window = records[-history_size:] if history_size > 0 else []
    historical = tuple(HistoricalPoint.from_record(r) for r in window)

    return ObservationSnapshot(
        latest=latest,
        historical=historical,
        condition_score=condition_score(
            latest.wave_height, latest.wind_speed, max_wave_height, max_wind_speed
        ),
        last_updated=now,
        skipped_lines=len(skipped),
    )
