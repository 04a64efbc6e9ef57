"""NWS marine zone forecast bulletin client."""

import logging

from marinewatch.ingest.text_client import DEFAULT_USER_AGENT, fetch_text

logger = logging.getLogger(__name__)

NWS_MARINE_BASE_URL = "https://tgftp.nws.noaa.gov/data/forecasts/marine"
DEFAULT_BULLETIN_PATH = "offshore/gm/{zone}.txt"


class NwsMarineClient:
    def __init__(
        self,
        base_url: str = NWS_MARINE_BASE_URL,
        bulletin_path: str = DEFAULT_BULLETIN_PATH,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.bulletin_path = bulletin_path.lstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout

    def bulletin_url(self, zone_id: str) -> str:
        path = self.bulletin_path.format(zone=zone_id.lower())
        return f"{self.base_url}/{path}"

    def get_bulletin(self, zone_id: str) -> str:
        """Fetch the bulletin text that carries ``zone_id``'s section."""
        url = self.bulletin_url(zone_id)
        logger.info("Fetching NWS marine bulletin for %s: %s", zone_id, url)
        return fetch_text(url, self.user_agent, self.timeout)
