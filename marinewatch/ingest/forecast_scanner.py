"""Line scanner for multi-zone NWS marine forecast bulletins.

A bulletin is a sequence of zone sections, each introduced by a UGC header
line such as ``GMZ040-151000-``. Within a section, forecast periods look like::

    .TODAY...SE winds 15 to 20 kt. Seas 4 to 6 ft. Isolated showers.
    .TONIGHT...S winds 10 kt. Seas 2 ft or less.
    .SAT NIGHT...E winds 5 to 10 kt.

Section boundaries are handled by an explicit two-state machine; regexes are
only used to pull fields out of a single period line.
"""

import logging
import re
from datetime import datetime
from enum import StrEnum

from marinewatch.models.common import utc_now
from marinewatch.models.forecast import (
    SEAS_UNKNOWN,
    CurrentConditions,
    ForecastBundle,
    ForecastPeriod,
)

logger = logging.getLogger(__name__)

PERIOD_PATTERN = re.compile(r"^\.(TODAY|TONIGHT|[A-Z]{3}(?:\s+NIGHT)?)\.\.\.(.+)$")
WIND_PATTERN = re.compile(
    r"([A-Z]{1,3}(?:\s+to\s+[A-Z]{1,3})?)\s+winds?\s+(\d+(?:\s+to\s+\d+)?\s+kt)",
    re.IGNORECASE,
)
SEAS_PATTERN = re.compile(
    r"seas\s+(\d+\s+to\s+\d+\s+ft|\d+\s+ft\s+or\s+less)",
    re.IGNORECASE,
)
WEATHER_PATTERN = re.compile(r"\.\s*([A-Za-z\s]+)\.")


class ScanState(StrEnum):
    OUTSIDE_TARGET = "outside_target"
    INSIDE_TARGET = "inside_target"


def extract_wind(text: str) -> str:
    """``SE to S winds 15 to 20 kt`` style phrase, or "" when absent."""
    m = WIND_PATTERN.search(text)
    if m is None:
        return ""
    return re.sub(r"\s+", " ", f"{m.group(1)} winds {m.group(2)}").strip()


def extract_seas(text: str) -> str:
    """``4 to 6 ft`` / ``2 ft or less``, or ``Unknown`` when absent."""
    m = SEAS_PATTERN.search(text)
    return m.group(1).strip() if m else SEAS_UNKNOWN


def extract_weather(text: str) -> str | None:
    m = WEATHER_PATTERN.search(text)
    return m.group(1).strip() if m else None


def parse_period(line: str) -> ForecastPeriod | None:
    m = PERIOD_PATTERN.match(line)
    if m is None:
        return None
    label, body = m.group(1), m.group(2)
    return ForecastPeriod(
        date=label,
        wind=extract_wind(body),
        seas=extract_seas(body),
        weather=extract_weather(body),
    )


class ForecastSectionScanner:
    """Extracts one zone's section and periods from a bulletin."""

    def __init__(self, zone_id: str, zone_prefix: str | None = None):
        self.zone_id = zone_id.strip().upper().rstrip("-")
        self.header = f"{self.zone_id}-"
        # UGC zone codes are SSZnnn; the first three characters are shared
        # by every zone section of the same bulletin.
        self.zone_prefix = (zone_prefix or self.zone_id[:3]).upper()

    def scan(self, text: str, now: datetime | None = None) -> ForecastBundle:
        if now is None:
            now = utc_now()

        state = ScanState.OUTSIDE_TARGET
        section: list[str] = []
        periods: list[ForecastPeriod] = []

        for raw_line in text.splitlines():
            line = raw_line.strip()
            if not line:
                continue

            if state == ScanState.OUTSIDE_TARGET:
                if line.startswith(self.header):
                    state = ScanState.INSIDE_TARGET
                    section.append(line)
                continue

            if line.startswith(self.header):
                section.append(line)
                continue
            if line.startswith(self.zone_prefix):
                break

            section.append(line)
            period = parse_period(line)
            if period is not None:
                periods.append(period)

        if state == ScanState.OUTSIDE_TARGET:
            logger.warning("Zone %s not found in bulletin", self.zone_id)
        else:
            logger.debug(
                "Zone %s: %d lines, %d periods",
                self.zone_id, len(section), len(periods),
            )

        return ForecastBundle(
            timestamp=now,
            raw_text="\n".join(section).strip(),
            current_conditions=CurrentConditions.from_period(periods[0]) if periods else None,
            forecast=tuple(periods),
        )


def scan_bulletin(
    text: str,
    zone_id: str,
    zone_prefix: str | None = None,
    now: datetime | None = None,
) -> ForecastBundle:
    return ForecastSectionScanner(zone_id, zone_prefix).scan(text, now)
