"""CLI entry point for the solar intel engine."""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from src.config.settings import ProviderSettings
from src.service import SolarIntelService
from src.utils.exceptions import InputValidationError, SolarIntelError
from src.utils.logger import configure_logging


def _parse_location(value: str) -> dict[str, Any]:
    """Parse ``LAT,LON`` or ``NAME=LAT,LON``."""
    name = None
    if "=" in value:
        name, value = value.split("=", 1)
    try:
        lat_str, lon_str = value.split(",")
        lat, lon = float(lat_str), float(lon_str)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected LAT,LON or NAME=LAT,LON, got '{value}'"
        )
    location: dict[str, Any] = {"lat": lat, "lon": lon}
    if name:
        location["name"] = name
    return location


def _add_coordinates(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, required=True, help="Latitude (-90..90).")
    parser.add_argument("--lon", type=float, required=True, help="Longitude (-180..180).")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        description="Solar potential, PV yield, tilt and forecast queries (NREL, Open-Meteo).",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Console logging level (default: WARNING).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    overview = subparsers.add_parser("overview", help="Quick solar potential rating.")
    _add_coordinates(overview)

    estimate = subparsers.add_parser("pv-estimate", help="PVWatts annual/monthly output.")
    _add_coordinates(estimate)
    estimate.add_argument("--capacity", type=float, default=4.0, help="System size in kW.")
    estimate.add_argument("--tilt", type=float, help="Panel tilt (default: |lat|).")
    estimate.add_argument("--azimuth", type=float, help="Panel azimuth (default: 180).")
    estimate.add_argument(
        "--module-type", choices=["standard", "premium", "thinfilm"], help="Module type."
    )
    estimate.add_argument("--losses", type=float, help="System losses in percent.")

    resource = subparsers.add_parser("solar-resource", help="Monthly irradiance averages.")
    _add_coordinates(resource)

    forecast = subparsers.add_parser("radiation-forecast", help="Radiation forecast.")
    _add_coordinates(forecast)
    forecast.add_argument("--days", type=int, default=7, help="Forecast days (1-16).")

    tilt = subparsers.add_parser("optimal-tilt", help="Search the best panel tilt.")
    _add_coordinates(tilt)
    tilt.add_argument("--capacity", type=float, default=4.0, help="System size in kW.")

    compare = subparsers.add_parser("compare", help="Rank 2-5 locations by output.")
    compare.add_argument(
        "locations",
        nargs="+",
        type=_parse_location,
        help="Locations as LAT,LON or NAME=LAT,LON.",
    )
    compare.add_argument("--capacity", type=float, default=4.0, help="System size in kW.")

    return parser.parse_args(argv)


async def run_command(service: SolarIntelService, args: argparse.Namespace) -> dict[str, Any]:
    """Dispatch a parsed command to the matching service operation."""
    if args.command == "overview":
        return await service.overview(args.lat, args.lon)
    if args.command == "pv-estimate":
        return await service.pv_estimate(
            args.lat,
            args.lon,
            capacity_kw=args.capacity,
            tilt_deg=args.tilt,
            azimuth_deg=args.azimuth,
            module_type=args.module_type,
            losses_percent=args.losses,
        )
    if args.command == "solar-resource":
        return await service.solar_resource(args.lat, args.lon)
    if args.command == "radiation-forecast":
        return await service.radiation_forecast(args.lat, args.lon, forecast_days=args.days)
    if args.command == "optimal-tilt":
        return await service.optimal_tilt(args.lat, args.lon, capacity_kw=args.capacity)
    return await service.compare_locations(args.locations, capacity_kw=args.capacity)


def main(argv: list[str] | None = None) -> None:
    """Run one operation from CLI arguments and print its JSON result.

    Args:
        argv: Argument list (defaults to sys.argv[1:]).
    """
    args = parse_args(argv)

    log_level = getattr(logging, args.log_level)
    logger = configure_logging(console_level=log_level)

    service = SolarIntelService(settings=ProviderSettings.from_env())
    logger.info(f"Running {args.command}")

    try:
        result = asyncio.run(run_command(service, args))
    except InputValidationError as e:
        print(json.dumps(e.to_dict(), indent=2))
        sys.exit(2)
    except SolarIntelError as e:
        print(json.dumps(e.to_dict(), indent=2))
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
