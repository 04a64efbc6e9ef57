"""Plain-text HTTP retrieval shared by the NDBC and NWS clients."""

import logging

import httpx

from marinewatch.models.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "marinewatch/0.1.0"


def fetch_text(url: str, user_agent: str = DEFAULT_USER_AGENT, timeout: float = 30.0) -> str:
    """GET ``url`` and return its body.

    Transport errors, error statuses and empty bodies all raise
    UpstreamUnavailable.
    """
    headers = {"User-Agent": user_agent, "Accept": "text/plain"}
    try:
        resp = httpx.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        resp.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("%s returned %d", url, e.response.status_code)
        raise UpstreamUnavailable(
            f"HTTP {e.response.status_code} from {url}", e.response.status_code
        ) from e
    except httpx.RequestError as e:
        logger.error("Request to %s failed: %s", url, e)
        raise UpstreamUnavailable(f"Request failed: {e}") from e

    text = resp.text
    if not text.strip():
        raise UpstreamUnavailable(f"No data received from {url}", resp.status_code)
    logger.debug("Received %d chars from %s: %r", len(text), url, text[:200])
    return text
