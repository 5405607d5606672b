"""Pydantic schemas for provider responses.

Payloads are validated here, at the fetch boundary, so the pure
computations never see a missing field.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.utils.exceptions import MalformedResponseError

MONTH_KEYS = [
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
]

ModelT = TypeVar("ModelT", bound=BaseModel)


class MonthlyValues(BaseModel):
    """Annual average plus 12 monthly values, January to December."""

    annual: float
    monthly: list[float] = Field(min_length=12, max_length=12)

    @field_validator("monthly", mode="before")
    @classmethod
    def order_month_keys(cls, v: Any) -> Any:
        """Accept the ``{"jan": .., "dec": ..}`` object form NREL returns."""
        if isinstance(v, dict):
            missing = [m for m in MONTH_KEYS if m not in v]
            if missing:
                raise ValueError(f"monthly values missing months: {missing}")
            return [v[m] for m in MONTH_KEYS]
        return v


class SolarResourceOutputs(BaseModel):
    avg_dni: MonthlyValues
    avg_ghi: MonthlyValues
    avg_lat_tilt: MonthlyValues


class SolarResourceResponse(BaseModel):
    """NREL Solar Resource v1 response."""

    outputs: SolarResourceOutputs


class PVWattsOutputs(BaseModel):
    ac_annual: float = Field(ge=0)
    capacity_factor: float
    solrad_annual: float = Field(ge=0)
    ac_monthly: list[float] = Field(min_length=12, max_length=12)
    solrad_monthly: list[float] = Field(min_length=12, max_length=12)


class PVWattsResponse(BaseModel):
    """NREL PVWatts v8 response."""

    outputs: PVWattsOutputs


class HourlyRadiation(BaseModel):
    time: list[str]
    shortwave_radiation: list[float | None]
    direct_radiation: list[float | None]
    diffuse_radiation: list[float | None]
    direct_normal_irradiance: list[float | None]


class DailySunshine(BaseModel):
    time: list[str]
    sunshine_duration: list[float | None]


class ForecastResponse(BaseModel):
    """Open-Meteo forecast response for the radiation variables."""

    timezone: str | None = None
    hourly: HourlyRadiation
    daily: DailySunshine


def parse_payload(model: type[ModelT], payload: Any, api: str) -> ModelT:
    """Validate a raw JSON payload against a response schema.

    Raises:
        MalformedResponseError: If the payload does not match ``model``.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        raise MalformedResponseError(
            f"{api} response is missing expected fields",
            context={
                "api": api,
                "schema": model.__name__,
                "errors": e.error_count(),
                "first_error": e.errors()[0]["loc"] if e.errors() else None,
            },
        ) from e
