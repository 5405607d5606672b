"""Open-Meteo client for hourly solar radiation forecasts."""

from typing import Any

from src.config.settings import ProviderSettings
from src.providers.http import fetch_json_async
from src.utils.logger import get_logger

logger = get_logger(__name__)

FORECAST_PATH = "/v1/forecast"

HOURLY_VARIABLES = [
    "direct_radiation",
    "diffuse_radiation",
    "direct_normal_irradiance",
    "shortwave_radiation",
]
DAILY_VARIABLES = ["sunshine_duration"]


class OpenMeteoClient:
    """Async client for the Open-Meteo forecast API (no key required).

    Args:
        settings: Provider settings carrying the base URL and timeout.
    """

    def __init__(self, settings: ProviderSettings | None = None) -> None:
        self.settings = settings or ProviderSettings()

    @property
    def forecast_url(self) -> str:
        return f"{self.settings.open_meteo_base_url}{FORECAST_PATH}"

    async def fetch_radiation_forecast(
        self, lat: float, lon: float, forecast_days: int
    ) -> Any:
        """Fetch hourly radiation and daily sunshine duration.

        Timestamps come back in the location's local timezone.

        Returns:
            Raw JSON payload from the forecast API.
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": ",".join(HOURLY_VARIABLES),
            "daily": ",".join(DAILY_VARIABLES),
            "forecast_days": forecast_days,
            "timezone": "auto",
        }
        logger.info(f"Fetching {forecast_days}-day radiation forecast for ({lat}, {lon})")
        return await fetch_json_async(
            self.forecast_url,
            params=params,
            timeout_s=self.settings.request_timeout_s,
            api="Open-Meteo",
        )
