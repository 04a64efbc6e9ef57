"""NDBC realtime buoy feed client."""

import logging

from marinewatch.ingest.text_client import DEFAULT_USER_AGENT, fetch_text

logger = logging.getLogger(__name__)

NDBC_BASE_URL = "https://www.ndbc.noaa.gov/data/realtime2"


class NdbcClient:
    def __init__(
        self,
        base_url: str = NDBC_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def realtime_url(self, station_id: str) -> str:
        return f"{self.base_url}/{station_id}.txt"

    def get_realtime(self, station_id: str) -> str:
        """Fetch the standard meteorological realtime text for a station."""
        url = self.realtime_url(station_id)
        logger.info("Fetching NDBC station %s: %s", station_id, url)
        return fetch_text(url, self.user_agent, self.timeout)
