"""Observation pipeline: fetch NDBC text and aggregate it."""

import logging
from collections.abc import Callable
from datetime import datetime

from marinewatch.config.schema import MarineConfig
from marinewatch.ingest.aggregator import aggregate
from marinewatch.ingest.ndbc_client import NdbcClient
from marinewatch.models.common import utc_now
from marinewatch.models.observation import ObservationSnapshot

logger = logging.getLogger(__name__)


class ObservationPipeline:
    def __init__(
        self,
        config: MarineConfig,
        client: NdbcClient,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.client = client
        self.clock = clock

    def __call__(self) -> ObservationSnapshot:
        station_id = self.config.station.station_id
        raw = self.client.get_realtime(station_id)
        scoring = self.config.scoring
        snapshot = aggregate(
            raw,
            now=self.clock(),
            history_size=scoring.history_size,
            max_wave_height=scoring.max_wave_height_m,
            max_wind_speed=scoring.max_wind_speed_ms,
        )
        logger.info(
            "Station %s: latest %s wave=%s wind=%s score=%d",
            station_id,
            snapshot.latest.timestamp,
            snapshot.latest.wave_height,
            snapshot.latest.wind_speed,
            snapshot.condition_score,
        )
        return snapshot
