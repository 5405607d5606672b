"""NREL developer API client: Solar Resource v1 and PVWatts v8."""

from typing import Any

from src.config.schema import SystemConfig
from src.config.settings import ProviderSettings
from src.providers.http import fetch_json_async
from src.utils.logger import get_logger

logger = get_logger(__name__)

SOLAR_RESOURCE_PATH = "/api/solar/solar_resource/v1.json"
PVWATTS_PATH = "/api/pvwatts/v8.json"

# Fixed open rack
ARRAY_TYPE = 1


class NRELClient:
    """Async client for the NREL Solar Resource and PVWatts endpoints.

    Args:
        settings: Provider settings carrying the API key, base URL and timeout.
    """

    def __init__(self, settings: ProviderSettings | None = None) -> None:
        self.settings = settings or ProviderSettings()

    @property
    def solar_resource_url(self) -> str:
        return f"{self.settings.nrel_base_url}{SOLAR_RESOURCE_PATH}"

    @property
    def pvwatts_url(self) -> str:
        return f"{self.settings.nrel_base_url}{PVWATTS_PATH}"

    async def fetch_solar_resource(self, lat: float, lon: float) -> Any:
        """Fetch average GHI, DNI and latitude-tilt irradiance for a location.

        Returns:
            Raw JSON payload from the Solar Resource API.
        """
        params = {"api_key": self.settings.nrel_api_key, "lat": lat, "lon": lon}
        logger.info(f"Fetching NREL solar resource for ({lat}, {lon})")
        return await fetch_json_async(
            self.solar_resource_url,
            params=params,
            timeout_s=self.settings.request_timeout_s,
            api="NREL Solar Resource",
        )

    async def fetch_pvwatts(self, lat: float, lon: float, system: SystemConfig) -> Any:
        """Run a PVWatts simulation for a system at a location.

        Returns:
            Raw JSON payload from the PVWatts API.
        """
        params = {
            "api_key": self.settings.nrel_api_key,
            "system_capacity": system.capacity_kw,
            "azimuth": system.azimuth_deg,
            "tilt": system.tilt_deg,
            "array_type": ARRAY_TYPE,
            "module_type": system.module_type_code,
            "losses": system.losses_percent,
            "lat": lat,
            "lon": lon,
        }
        logger.info(
            f"Fetching PVWatts estimate for ({lat}, {lon}): "
            f"{system.capacity_kw} kW, tilt={system.tilt_deg}, azimuth={system.azimuth_deg}"
        )
        return await fetch_json_async(
            self.pvwatts_url,
            params=params,
            timeout_s=self.settings.request_timeout_s,
            api="PVWatts",
        )
