"""CLI entry point for the marine conditions service."""

import argparse
import json
import logging
from pathlib import Path

from marinewatch.config.loader import (
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from marinewatch.config.schema import MarineConfig
from marinewatch.ingest.aggregator import aggregate
from marinewatch.ingest.forecast_scanner import scan_bulletin
from marinewatch.models.errors import MarineWatchError
from marinewatch.models.forecast import ForecastBundle
from marinewatch.models.observation import ObservationSnapshot
from marinewatch.pipeline.service import MarineService

DEFAULT_CONFIG = "marinewatch.yaml"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="marinewatch",
        description="Buoy observations and marine zone forecasts",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    buoy_p = sub.add_parser("buoy", help="Fetch and summarize buoy data")
    buoy_p.add_argument("--json", action="store_true", help="Print JSON")

    fc_p = sub.add_parser("forecast", help="Fetch the zone forecast")
    fc_p.add_argument("--json", action="store_true", help="Print JSON")

    pb_p = sub.add_parser("parse-buoy", help="Parse a saved realtime feed file")
    pb_p.add_argument("path")

    pf_p = sub.add_parser("parse-forecast", help="Parse a saved bulletin file")
    pf_p.add_argument("path")

    serve_p = sub.add_parser("serve", help="Run the HTTP API")
    serve_p.add_argument("--host", default=None)
    serve_p.add_argument("--port", type=int, default=None)

    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "buoy":
        return _cmd_buoy(config, args)
    elif args.command == "forecast":
        return _cmd_forecast(config, args)
    elif args.command == "parse-buoy":
        return _cmd_parse_buoy(config, args)
    elif args.command == "parse-forecast":
        return _cmd_parse_forecast(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _print_snapshot(snapshot: ObservationSnapshot) -> None:
    latest = snapshot.latest
    print(f"Latest: {latest.timestamp.isoformat() if latest.timestamp else 'n/a'}")
    print(
        f"  Waves: {_fmt(latest.wave_height, 'm')} "
        f"@ {_fmt(latest.dominant_wave_period, 's')}"
    )
    print(
        f"  Wind: {_fmt(latest.wind_speed, 'm/s')} "
        f"from {_fmt(latest.wind_direction, 'deg')}"
    )
    print(
        f"  Air/Water: {_fmt(latest.air_temperature, 'C')} / "
        f"{_fmt(latest.water_temperature, 'C')}"
    )
    print(f"Historical points: {len(snapshot.historical)}")
    print(f"Condition score: {snapshot.condition_score}")


def _print_bundle(bundle: ForecastBundle) -> None:
    if not bundle.forecast:
        print("No forecast periods found")
        return
    for period in bundle.forecast:
        weather = f" | {period.weather}" if period.weather else ""
        print(f"{period.date}: {period.wind or 'wind n/a'} | seas {period.seas}{weather}")


def _fmt(value: float | None, unit: str) -> str:
    return f"{value:g} {unit}" if value is not None else "n/a"


def _cmd_buoy(config: MarineConfig, args) -> int:
    service = MarineService(config)
    try:
        snapshot = service.observations()
    except MarineWatchError as e:
        print(f"Error: {e}")
        return 1
    if args.json:
        print(json.dumps(snapshot.to_dict(), indent=2))
    else:
        _print_snapshot(snapshot)
    return 0


def _cmd_forecast(config: MarineConfig, args) -> int:
    service = MarineService(config)
    try:
        bundle = service.forecast()
    except MarineWatchError as e:
        print(f"Error: {e}")
        return 1
    if args.json:
        print(json.dumps(bundle.to_dict(), indent=2))
    else:
        _print_bundle(bundle)
    return 0


def _cmd_parse_buoy(config: MarineConfig, args) -> int:
    text = Path(args.path).read_text()
    try:
        snapshot = aggregate(
            text,
            history_size=config.scoring.history_size,
            max_wave_height=config.scoring.max_wave_height_m,
            max_wind_speed=config.scoring.max_wind_speed_ms,
        )
    except MarineWatchError as e:
        print(f"Error: {e}")
        return 1
    print(json.dumps(snapshot.to_dict(), indent=2))
    return 0


def _cmd_parse_forecast(config: MarineConfig, args) -> int:
    text = Path(args.path).read_text()
    bundle = scan_bulletin(text, config.zone.zone_id, config.zone.zone_prefix)
    print(json.dumps(bundle.to_dict(), indent=2))
    return 0


def _cmd_serve(config: MarineConfig, args) -> int:
    import uvicorn

    from marinewatch.server import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config: MarineConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            save_config(new_config, args.config)
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
