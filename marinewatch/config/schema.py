"""Pydantic v2 configuration schema with strict validation."""

from datetime import timedelta

from pydantic import BaseModel, Field

from marinewatch.ingest.ndbc_client import NDBC_BASE_URL
from marinewatch.ingest.nws_client import DEFAULT_BULLETIN_PATH, NWS_MARINE_BASE_URL
from marinewatch.ingest.text_client import DEFAULT_USER_AGENT


class StationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    station_id: str = Field(default="42019", min_length=1)
    ndbc_base_url: str = NDBC_BASE_URL


class ZoneConfig(BaseModel):
    model_config = {"extra": "forbid"}

    zone_id: str = Field(default="GMZ040", min_length=4)
    zone_prefix: str | None = None  # defaults to the first 3 chars of zone_id
    nws_base_url: str = NWS_MARINE_BASE_URL
    bulletin_path: str = DEFAULT_BULLETIN_PATH


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    observation_ttl_minutes: int = Field(default=60, ge=1)
    forecast_ttl_minutes: int = Field(default=720, ge=1)

    @property
    def observation_ttl(self) -> timedelta:
        return timedelta(minutes=self.observation_ttl_minutes)

    @property
    def forecast_ttl(self) -> timedelta:
        return timedelta(minutes=self.forecast_ttl_minutes)


class ScoringConfig(BaseModel):
    model_config = {"extra": "forbid"}

    history_size: int = Field(default=12, ge=1)
    max_wave_height_m: float = Field(default=5.0, gt=0.0)
    max_wind_speed_ms: float = Field(default=25.0, gt=0.0)


class HttpConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timeout_seconds: float = Field(default=30.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    static_dir: str | None = None
    auto_refresh: bool = True


class MarineConfig(BaseModel):
    model_config = {"extra": "forbid"}

    station: StationConfig = StationConfig()
    zone: ZoneConfig = ZoneConfig()
    cache: CacheConfig = CacheConfig()
    scoring: ScoringConfig = ScoringConfig()
    http: HttpConfig = HttpConfig()
    server: ServerConfig = ServerConfig()
