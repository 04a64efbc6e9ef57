"""Service wiring: one RefreshCache per data source, owned by the caller."""

import logging
from collections.abc import Callable
from datetime import datetime

from marinewatch.config.schema import MarineConfig
from marinewatch.ingest.ndbc_client import NdbcClient
from marinewatch.ingest.nws_client import NwsMarineClient
from marinewatch.ingest.refresh_cache import RefreshCache
from marinewatch.models.common import utc_now
from marinewatch.models.forecast import ForecastBundle
from marinewatch.models.observation import ObservationSnapshot
from marinewatch.pipeline.forecast import ForecastPipeline
from marinewatch.pipeline.observations import ObservationPipeline

logger = logging.getLogger(__name__)


def build_ndbc_client(config: MarineConfig) -> NdbcClient:
    return NdbcClient(
        base_url=config.station.ndbc_base_url,
        user_agent=config.http.user_agent,
        timeout=config.http.timeout_seconds,
    )


def build_nws_client(config: MarineConfig) -> NwsMarineClient:
    return NwsMarineClient(
        base_url=config.zone.nws_base_url,
        bulletin_path=config.zone.bulletin_path,
        user_agent=config.http.user_agent,
        timeout=config.http.timeout_seconds,
    )


class MarineService:
    def __init__(
        self,
        config: MarineConfig,
        ndbc_client: NdbcClient | None = None,
        nws_client: NwsMarineClient | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.clock = clock
        self.observation_cache: RefreshCache[ObservationSnapshot] = RefreshCache(
            ObservationPipeline(config, ndbc_client or build_ndbc_client(config), clock),
            ttl=config.cache.observation_ttl,
            name=f"observations[{config.station.station_id}]",
            clock=clock,
        )
        self.forecast_cache: RefreshCache[ForecastBundle] = RefreshCache(
            ForecastPipeline(config, nws_client or build_nws_client(config), clock),
            ttl=config.cache.forecast_ttl,
            name=f"forecast[{config.zone.zone_id}]",
            clock=clock,
        )

    def observations(self) -> ObservationSnapshot:
        return self.observation_cache.get()

    def forecast(self) -> ForecastBundle:
        return self.forecast_cache.get()

    def invalidate(self) -> None:
        logger.info("Invalidating observation and forecast caches")
        self.observation_cache.invalidate()
        self.forecast_cache.invalidate()

    def cache_status(self) -> dict:
        now = self.clock()
        status = {}
        for key, cache in (
            ("observations", self.observation_cache),
            ("forecast", self.forecast_cache),
        ):
            entry = cache.entry
            status[key] = {
                "cached": entry is not None,
                "capturedAt": entry.captured_at.isoformat() if entry else None,
                "ageSeconds": round(entry.age(now).total_seconds(), 1) if entry else None,
                "ttlSeconds": cache.ttl.total_seconds(),
                "fresh": entry.is_fresh(now) if entry else False,
            }
        return status
