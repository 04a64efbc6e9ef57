"""Tests for pipelines and the cache-owning service with mocked clients."""

from unittest.mock import MagicMock

import pytest

from marinewatch.config.schema import MarineConfig
from marinewatch.ingest.ndbc_client import NdbcClient
from marinewatch.ingest.nws_client import NwsMarineClient
from marinewatch.models.errors import MissingHeaderError, UpstreamUnavailable
from marinewatch.pipeline.forecast import ForecastPipeline
from marinewatch.pipeline.observations import ObservationPipeline
from marinewatch.pipeline.service import MarineService


def _ndbc(text: str) -> MagicMock:
    client = MagicMock(spec=NdbcClient)
    client.get_realtime.return_value = text
    return client


def _nws(text: str) -> MagicMock:
    client = MagicMock(spec=NwsMarineClient)
    client.get_bulletin.return_value = text
    return client


class TestObservationPipeline:
    def test_uses_configured_station_and_scoring(self, ndbc_text: str, clock):
        config = MarineConfig(
            station={"station_id": "41013"},
            scoring={"history_size": 5},
        )
        client = _ndbc(ndbc_text)
        snapshot = ObservationPipeline(config, client, clock)()
        client.get_realtime.assert_called_once_with("41013")
        assert len(snapshot.historical) == 5
        assert snapshot.last_updated == clock.now

    def test_parse_failure_propagates(self, clock):
        client = _ndbc("no header here\n")
        with pytest.raises(MissingHeaderError):
            ObservationPipeline(MarineConfig(), client, clock)()


class TestForecastPipeline:
    def test_scans_configured_zone(self, bulletin_text: str, clock):
        client = _nws(bulletin_text)
        bundle = ForecastPipeline(MarineConfig(), client, clock)()
        client.get_bulletin.assert_called_once_with("GMZ040")
        assert len(bundle.forecast) == 4
        assert bundle.timestamp == clock.now


class TestMarineService:
    def test_observations_cached_within_ttl(self, default_config, ndbc_text, bulletin_text, clock):
        ndbc = _ndbc(ndbc_text)
        service = MarineService(default_config, ndbc, _nws(bulletin_text), clock)
        first = service.observations()
        clock.advance(minutes=30)
        assert service.observations() is first
        assert ndbc.get_realtime.call_count == 1

    def test_observation_ttl_expiry(self, default_config, ndbc_text, bulletin_text, clock):
        ndbc = _ndbc(ndbc_text)
        service = MarineService(default_config, ndbc, _nws(bulletin_text), clock)
        first = service.observations()
        clock.advance(minutes=61)
        assert service.observations() is not first
        assert ndbc.get_realtime.call_count == 2

    def test_forecast_ttl_independent(self, default_config, ndbc_text, bulletin_text, clock):
        nws = _nws(bulletin_text)
        service = MarineService(default_config, _ndbc(ndbc_text), nws, clock)
        first = service.forecast()
        clock.advance(hours=11)
        assert service.forecast() is first
        clock.advance(hours=2)
        assert service.forecast() is not first
        assert nws.get_bulletin.call_count == 2

    def test_stale_served_on_upstream_failure(self, default_config, ndbc_text, bulletin_text, clock):
        ndbc = _ndbc(ndbc_text)
        service = MarineService(default_config, ndbc, _nws(bulletin_text), clock)
        first = service.observations()
        ndbc.get_realtime.side_effect = UpstreamUnavailable("NDBC down")
        clock.advance(hours=2)
        assert service.observations() is first

    def test_failure_without_cache_propagates(self, default_config, bulletin_text, clock):
        ndbc = MagicMock(spec=NdbcClient)
        ndbc.get_realtime.side_effect = UpstreamUnavailable("NDBC down")
        service = MarineService(default_config, ndbc, _nws(bulletin_text), clock)
        with pytest.raises(UpstreamUnavailable):
            service.observations()

    def test_invalidate_and_status(self, default_config, ndbc_text, bulletin_text, clock):
        ndbc = _ndbc(ndbc_text)
        service = MarineService(default_config, ndbc, _nws(bulletin_text), clock)
        service.observations()
        clock.advance(minutes=10)
        status = service.cache_status()
        assert status["observations"]["cached"] is True
        assert status["observations"]["ageSeconds"] == 600.0
        assert status["observations"]["fresh"] is True
        assert status["forecast"]["cached"] is False

        service.invalidate()
        assert service.cache_status()["observations"]["cached"] is False
        service.observations()
        assert ndbc.get_realtime.call_count == 2
