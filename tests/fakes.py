"""Sample provider payloads and in-memory provider clients for tests."""

import asyncio
import copy
from typing import Any

from src.config.schema import SystemConfig
from src.utils.exceptions import UpstreamError

MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"]

# Trimmed NREL PVWatts v8 response for a 4 kW system near Denver
SAMPLE_PVWATTS_RESPONSE: dict[str, Any] = {
    "inputs": {"system_capacity": "4", "tilt": "40", "azimuth": "180"},
    "errors": [],
    "warnings": [],
    "version": "8.2.1",
    "outputs": {
        "ac_monthly": [
            474.1532, 484.5118, 619.3316, 624.9241, 645.2219, 620.6032,
            619.7413, 611.1859, 585.3008, 552.1574, 468.0049, 442.8765,
        ],
        "poa_monthly": [142.1, 143.9, 188.2, 194.6, 206.7, 203.2, 205.0, 199.1, 186.4, 170.5, 140.1, 131.0],
        "solrad_monthly": [
            4.5839, 5.1392, 6.0712, 6.4866, 6.6674, 6.7733,
            6.6129, 6.4235, 6.2133, 5.4996, 4.6700, 4.2258,
        ],
        "dc_monthly": [494.3, 505.1, 646.4, 652.6, 673.9, 648.3, 647.5, 638.6, 611.5, 576.6, 488.1, 461.7],
        "ac_annual": 6748.0126,
        "solrad_annual": 5.7806,
        "capacity_factor": 19.2581,
    },
}

# Trimmed NREL Solar Resource v1 response; monthly values keyed by month
SAMPLE_RESOURCE_RESPONSE: dict[str, Any] = {
    "version": "1.0.0",
    "errors": [],
    "outputs": {
        "avg_dni": {
            "annual": 6.06,
            "monthly": dict(zip(MONTHS, [5.2, 5.5, 6.1, 6.4, 6.6, 7.3, 7.0, 6.6, 6.6, 5.9, 5.3, 4.9])),
        },
        "avg_ghi": {
            "annual": 4.81,
            "monthly": dict(zip(MONTHS, [2.5, 3.4, 4.6, 5.7, 6.5, 7.2, 7.0, 6.2, 5.2, 3.9, 2.8, 2.3])),
        },
        "avg_lat_tilt": {
            "annual": 5.88,
            "monthly": dict(zip(MONTHS, [5.0, 5.5, 6.0, 6.2, 6.1, 6.3, 6.3, 6.3, 6.4, 6.0, 5.2, 4.8])),
        },
    },
}


def make_forecast_response(days: int = 2) -> dict[str, Any]:
    """Open-Meteo payload with a simple bell-shaped day repeated ``days`` times."""
    day_profile: list[float | None] = [0.0] * 6 + [
        50.0, 150.0, 300.0, 450.0, 580.0, 650.0, 700.0, 640.0, 520.0, 380.0, 200.0, 60.0,
    ] + [0.0] * 6
    hourly_times = [f"2026-06-{d + 1:02d}T{h:02d}:00" for d in range(days) for h in range(24)]
    shortwave = day_profile * days
    return {
        "latitude": 39.75,
        "longitude": -104.98,
        "timezone": "America/Denver",
        "hourly": {
            "time": hourly_times,
            "shortwave_radiation": list(shortwave),
            "direct_radiation": [v * 0.7 if v else v for v in shortwave],
            "diffuse_radiation": [v * 0.3 if v else v for v in shortwave],
            "direct_normal_irradiance": [v * 1.1 if v else v for v in shortwave],
        },
        "daily": {
            "time": [f"2026-06-{d + 1:02d}" for d in range(days)],
            "sunshine_duration": [43200.0] * days,
        },
    }


def pvwatts_payload(ac_annual: float) -> dict[str, Any]:
    """Copy of the sample PVWatts payload with a different annual output."""
    payload = copy.deepcopy(SAMPLE_PVWATTS_RESPONSE)
    payload["outputs"]["ac_annual"] = ac_annual
    return payload


def resource_payload(ghi: float, dni: float) -> dict[str, Any]:
    payload = copy.deepcopy(SAMPLE_RESOURCE_RESPONSE)
    payload["outputs"]["avg_ghi"]["annual"] = ghi
    payload["outputs"]["avg_dni"]["annual"] = dni
    return payload


class FakeNRELClient:
    """In-memory stand-in for NRELClient.

    Args:
        pvwatts: Callable ``(lat, lon, system) -> payload``; may raise.
        resource: Callable ``(lat, lon) -> payload``; may raise.
    """

    def __init__(self, pvwatts=None, resource=None) -> None:
        self._pvwatts = pvwatts or (lambda lat, lon, system: copy.deepcopy(SAMPLE_PVWATTS_RESPONSE))
        self._resource = resource or (lambda lat, lon: copy.deepcopy(SAMPLE_RESOURCE_RESPONSE))
        self.pvwatts_calls: list[tuple[float, float, SystemConfig]] = []
        self.resource_calls: list[tuple[float, float]] = []

    async def fetch_pvwatts(self, lat: float, lon: float, system: SystemConfig) -> Any:
        self.pvwatts_calls.append((lat, lon, system))
        await asyncio.sleep(0)
        return self._pvwatts(lat, lon, system)

    async def fetch_solar_resource(self, lat: float, lon: float) -> Any:
        self.resource_calls.append((lat, lon))
        await asyncio.sleep(0)
        return self._resource(lat, lon)


class FakeForecastClient:
    """In-memory stand-in for OpenMeteoClient."""

    def __init__(self, payload: dict[str, Any] | None = None) -> None:
        self.payload = payload
        self.calls: list[tuple[float, float, int]] = []

    async def fetch_radiation_forecast(self, lat: float, lon: float, forecast_days: int) -> Any:
        self.calls.append((lat, lon, forecast_days))
        return self.payload if self.payload is not None else make_forecast_response(forecast_days)


def failing(status_code: int = 503):
    """Provider callable that always fails with an UpstreamError."""

    def _raise(*args: Any) -> Any:
        raise UpstreamError(
            f"PVWatts API returned HTTP {status_code}",
            context={"api": "PVWatts", "status_code": status_code},
        )

    return _raise


