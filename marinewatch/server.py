"""Marine conditions API: FastAPI app serving buoy and forecast data."""

import logging
import threading
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from marinewatch.config.schema import MarineConfig
from marinewatch.models.common import utc_now
from marinewatch.models.errors import MarineWatchError
from marinewatch.pipeline.service import MarineService

logger = logging.getLogger(__name__)


class AutoRefresher:
    """Background thread that keeps the observation cache warm."""

    def __init__(self, service: MarineService, interval_seconds: float):
        self.service = service
        self.interval_seconds = interval_seconds
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(
            target=self._run, name="marinewatch-refresh", daemon=True
        )
        self._thread.start()
        logger.info("Auto-refresh started, every %.0fs", self.interval_seconds)

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout=5.0)
            self._thread = None

    def refresh_once(self) -> bool:
        try:
            snapshot = self.service.observations()
        except MarineWatchError as e:
            logger.error("Auto-refresh failed: %s", e)
            return False
        except Exception:
            logger.exception("Auto-refresh failed")
            return False
        logger.info(
            "Data refreshed at %s: latest=%s wave=%s wind=%s",
            utc_now().isoformat(),
            snapshot.latest.timestamp,
            snapshot.latest.wave_height,
            snapshot.latest.wind_speed,
        )
        return True

    def _run(self) -> None:
        self.refresh_once()
        while not self._stop.wait(self.interval_seconds):
            self.refresh_once()


def _unavailable(message: str, error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=503,
        content={"error": message, "details": str(error)},
    )


def create_app(config: MarineConfig, service: MarineService | None = None) -> FastAPI:
    service = service or MarineService(config)
    static_dir = Path(config.server.static_dir) if config.server.static_dir else None
    refresher = AutoRefresher(service, config.cache.observation_ttl.total_seconds())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.server.auto_refresh:
            refresher.start()
        try:
            yield
        finally:
            refresher.stop()

    app = FastAPI(title="Marine Conditions", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.service = service
    app.state.refresher = refresher

    @app.get("/api/buoy-data")
    def get_buoy_data():
        """Latest composite observation, recent history and condition score."""
        try:
            snapshot = service.observations()
        except MarineWatchError as e:
            logger.error("Buoy data unavailable: %s", e)
            return _unavailable("Failed to fetch buoy data", e)
        return snapshot.to_dict()

    @app.get("/api/forecast")
    def get_forecast():
        """Periods for the configured marine zone."""
        try:
            bundle = service.forecast()
        except MarineWatchError as e:
            logger.error("Forecast unavailable: %s", e)
            return _unavailable("Failed to fetch forecast data", e)
        return bundle.to_dict()

    @app.get("/api/health")
    def get_health():
        return {
            "station": config.station.station_id,
            "zone": config.zone.zone_id,
            "caches": service.cache_status(),
            "timestamp": utc_now().isoformat(),
        }

    @app.post("/api/refresh")
    def refresh():
        service.invalidate()
        return {"status": "invalidated"}

    @app.get("/")
    def serve_index():
        index = static_dir / "index.html" if static_dir else None
        if index is not None and index.exists():
            return FileResponse(index, media_type="text/html")
        return HTMLResponse("<h1>Dashboard not found</h1>", status_code=404)

    # Registered last so /api/* routes take precedence.
    if static_dir is not None:
        app.mount("/", StaticFiles(directory=static_dir), name="static")

    return app
