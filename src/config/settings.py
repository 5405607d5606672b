"""Provider endpoints, credentials and request timeout."""

import os

from pydantic import BaseModel, Field

NREL_BASE_URL = "https://developer.nrel.gov"
OPEN_METEO_BASE_URL = "https://api.open-meteo.com"
DEFAULT_TIMEOUT_S = 15.0


class ProviderSettings(BaseModel):
    """Process-wide provider configuration, fixed at startup.

    Args:
        nrel_api_key: NREL developer API key (Solar Resource and PVWatts).
        nrel_base_url: Base URL of the NREL developer API.
        open_meteo_base_url: Base URL of the Open-Meteo forecast API.
        request_timeout_s: Deadline for a single provider request.
    """

    nrel_api_key: str = "DEMO_KEY"
    nrel_base_url: str = NREL_BASE_URL
    open_meteo_base_url: str = OPEN_METEO_BASE_URL
    request_timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)

    @classmethod
    def from_env(cls) -> "ProviderSettings":
        """Build settings, overriding defaults from environment variables if set."""
        overrides: dict[str, object] = {}
        if env_key := os.environ.get("NREL_API_KEY"):
            overrides["nrel_api_key"] = env_key
        if env_nrel_url := os.environ.get("NREL_BASE_URL"):
            overrides["nrel_base_url"] = env_nrel_url.rstrip("/")
        if env_meteo_url := os.environ.get("OPEN_METEO_BASE_URL"):
            overrides["open_meteo_base_url"] = env_meteo_url.rstrip("/")
        if env_timeout := os.environ.get("SOLAR_INTEL_TIMEOUT_S"):
            overrides["request_timeout_s"] = env_timeout
        return cls(**overrides)
