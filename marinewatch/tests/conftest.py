"""Shared test fixtures."""

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import yaml

from marinewatch.config.schema import MarineConfig

FIXTURES = Path(__file__).parent / "fixtures"


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 1, 15, 12, 5, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURES


@pytest.fixture
def ndbc_text() -> str:
    return (FIXTURES / "ndbc_42019.txt").read_text()


@pytest.fixture
def bulletin_text() -> str:
    return (FIXTURES / "gmz040_bulletin.txt").read_text()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def default_config() -> MarineConfig:
    return MarineConfig()


@pytest.fixture
def test_config() -> MarineConfig:
    """Config pointed at mock upstream hosts, auto-refresh off."""
    return MarineConfig(
        station={"station_id": "42019", "ndbc_base_url": "https://test-ndbc.example.com/realtime2"},
        zone={"zone_id": "GMZ040", "nws_base_url": "https://test-nws.example.com/marine"},
        server={"auto_refresh": False},
    )


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "station": {"station_id": "41013"},
        "cache": {"observation_ttl_minutes": 30},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
