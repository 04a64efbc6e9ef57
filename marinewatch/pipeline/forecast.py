"""Forecast pipeline: fetch the NWS bulletin and scan the target zone."""

import logging
from collections.abc import Callable
from datetime import datetime

from marinewatch.config.schema import MarineConfig
from marinewatch.ingest.forecast_scanner import ForecastSectionScanner
from marinewatch.ingest.nws_client import NwsMarineClient
from marinewatch.models.common import utc_now
from marinewatch.models.forecast import ForecastBundle

logger = logging.getLogger(__name__)


class ForecastPipeline:
    def __init__(
        self,
        config: MarineConfig,
        client: NwsMarineClient,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.client = client
        self.clock = clock
        self.scanner = ForecastSectionScanner(
            config.zone.zone_id, config.zone.zone_prefix
        )

    def __call__(self) -> ForecastBundle:
        raw = self.client.get_bulletin(self.config.zone.zone_id)
        bundle = self.scanner.scan(raw, now=self.clock())
        logger.info(
            "Zone %s: %d forecast periods", self.scanner.zone_id, len(bundle.forecast)
        )
        return bundle
