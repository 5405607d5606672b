"""Operation boundary: validated input -> provider calls -> decision-ready output."""

from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any, TypeVar

from pydantic import ValidationError

from src.config.schema import (
    DEFAULT_CAPACITY_KW,
    DEFAULT_FORECAST_DAYS,
    CapacityRequest,
    CompareRequest,
    ForecastRequest,
    Location,
    SystemConfig,
)
from src.config.settings import ProviderSettings
from src.engine.comparator import compare_locations
from src.engine.forecast import build_forecast
from src.engine.normalizers import (
    extract_annual_averages,
    normalize_pv_output,
    normalize_resource,
)
from src.engine.rating import rate
from src.engine.tilt import search_optimal_tilt, theoretical_tilt
from src.providers.nrel_client import NRELClient
from src.providers.open_meteo_client import OpenMeteoClient
from src.utils.exceptions import InputValidationError, ProviderError
from src.utils.logger import get_logger

logger = get_logger(__name__)

SOURCE_SOLAR_RESOURCE = "NREL Solar Resource (live)"
SOURCE_PVWATTS = "NREL PVWatts v8 (live)"
SOURCE_OPEN_METEO = "Open-Meteo (live)"
SOURCE_COMPARISON = "NREL PVWatts + Solar Resource (live)"

RequestT = TypeVar("RequestT")


def _validate(operation: str, build: Callable[[], RequestT]) -> RequestT:
    """Run a request constructor, converting pydantic errors to InputValidationError."""
    try:
        return build()
    except ValidationError as e:
        logger.warning(f"Rejected {operation} input: {e.error_count()} validation error(s)")
        raise InputValidationError(
            f"Invalid input for {operation}",
            context={"operation": operation, "error": str(e)},
        ) from e


def _stamp(output: dict[str, Any], data_source: str) -> dict[str, Any]:
    output["fetchedAt"] = datetime.now(tz=timezone.utc).isoformat()
    output["dataSource"] = data_source
    return output


class SolarIntelService:
    """Solar potential operations over NREL and Open-Meteo.

    Args:
        settings: Provider configuration. Defaults to built-in defaults; the
            CLI passes ``ProviderSettings.from_env()``.
        nrel_client: Optional client override (tests).
        forecast_client: Optional client override (tests).
    """

    def __init__(
        self,
        settings: ProviderSettings | None = None,
        nrel_client: NRELClient | None = None,
        forecast_client: OpenMeteoClient | None = None,
    ) -> None:
        self.settings = settings or ProviderSettings()
        self.nrel_client = nrel_client or NRELClient(self.settings)
        self.forecast_client = forecast_client or OpenMeteoClient(self.settings)

    async def overview(self, lat: float, lon: float) -> dict[str, Any]:
        """Quick rating of a location's solar potential."""
        location = _validate("overview", lambda: Location(lat=lat, lon=lon))

        try:
            raw = await self.nrel_client.fetch_solar_resource(location.lat, location.lon)
        except ProviderError as e:
            logger.error(f"overview failed for ({lat}, {lon}): {e}")
            raise

        avg_ghi, avg_dni = extract_annual_averages(raw)
        return _stamp(
            {
                "location": location.to_dict(),
                "solarPotential": rate(avg_ghi),
                "avgGHI_kWhPerM2PerDay": avg_ghi,
                "avgDNI_kWhPerM2PerDay": avg_dni,
                "optimalTilt": theoretical_tilt(location.lat).to_dict(),
            },
            SOURCE_SOLAR_RESOURCE,
        )

    async def pv_estimate(
        self,
        lat: float,
        lon: float,
        capacity_kw: float = DEFAULT_CAPACITY_KW,
        tilt_deg: float | None = None,
        azimuth_deg: float | None = None,
        module_type: str | None = None,
        losses_percent: float | None = None,
    ) -> dict[str, Any]:
        """Annual and monthly AC output for a configured system."""
        location, system = _validate(
            "pv_estimate",
            lambda: (
                Location(lat=lat, lon=lon),
                SystemConfig.for_location(
                    lat,
                    capacity_kw=capacity_kw,
                    tilt_deg=tilt_deg,
                    azimuth_deg=azimuth_deg,
                    module_type=module_type,
                    losses_percent=losses_percent,
                ),
            ),
        )

        try:
            raw = await self.nrel_client.fetch_pvwatts(location.lat, location.lon, system)
            output = normalize_pv_output(raw)
        except ProviderError as e:
            logger.error(f"pv_estimate failed for ({lat}, {lon}): {e}")
            raise

        return _stamp(
            {
                "location": location.to_dict(),
                "systemConfig": system.to_dict(),
                **output.to_dict(),
            },
            SOURCE_PVWATTS,
        )

    async def solar_resource(self, lat: float, lon: float) -> dict[str, Any]:
        """Monthly DNI, GHI and latitude-tilt irradiance."""
        location = _validate("solar_resource", lambda: Location(lat=lat, lon=lon))

        try:
            raw = await self.nrel_client.fetch_solar_resource(location.lat, location.lon)
            resource = normalize_resource(raw)
        except ProviderError as e:
            logger.error(f"solar_resource failed for ({lat}, {lon}): {e}")
            raise

        return _stamp(
            {"location": location.to_dict(), **resource.to_dict()},
            SOURCE_SOLAR_RESOURCE,
        )

    async def radiation_forecast(
        self, lat: float, lon: float, forecast_days: int = DEFAULT_FORECAST_DAYS
    ) -> dict[str, Any]:
        """Hourly radiation forecast with daily peak/average summaries."""
        request = _validate(
            "radiation_forecast",
            lambda: ForecastRequest(lat=lat, lon=lon, forecast_days=forecast_days),
        )

        try:
            raw = await self.forecast_client.fetch_radiation_forecast(
                request.lat, request.lon, request.forecast_days
            )
            forecast = build_forecast(raw, request.forecast_days)
        except ProviderError as e:
            logger.error(f"radiation_forecast failed for ({lat}, {lon}): {e}")
            raise

        return _stamp(
            {"location": {"lat": request.lat, "lon": request.lon}, **forecast.to_dict()},
            SOURCE_OPEN_METEO,
        )

    async def optimal_tilt(
        self, lat: float, lon: float, capacity_kw: float = DEFAULT_CAPACITY_KW
    ) -> dict[str, Any]:
        """Best of three simulated tilts around the rule-of-thumb value."""
        request = _validate(
            "optimal_tilt",
            lambda: CapacityRequest(lat=lat, lon=lon, capacity_kw=capacity_kw),
        )
        location = Location(lat=request.lat, lon=request.lon)

        try:
            result = await search_optimal_tilt(self.nrel_client, location, request.capacity_kw)
        except ProviderError as e:
            logger.error(f"optimal_tilt failed for ({lat}, {lon}): {e}")
            raise

        return _stamp(
            {
                "location": location.to_dict(),
                "systemCapacityKW": request.capacity_kw,
                **result.to_dict(),
            },
            SOURCE_PVWATTS,
        )

    async def compare_locations(
        self,
        locations: list[dict[str, Any]],
        capacity_kw: float = DEFAULT_CAPACITY_KW,
    ) -> dict[str, Any]:
        """Rank 2-5 locations by simulated annual output."""
        request = _validate(
            "compare_locations",
            lambda: CompareRequest(locations=locations, capacity_kw=capacity_kw),
        )

        try:
            result = await compare_locations(
                self.nrel_client, request.locations, request.capacity_kw
            )
        except ProviderError as e:
            logger.error(f"compare_locations failed: {e}")
            raise

        return _stamp(
            {"systemCapacityKW": request.capacity_kw, **result.to_dict()},
            SOURCE_COMPARISON,
        )
