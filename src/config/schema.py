"""Pydantic validation models for caller input."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

MODULE_TYPE_CODES: dict[str, int] = {"standard": 0, "premium": 1, "thinfilm": 2}

DEFAULT_CAPACITY_KW = 4.0
DEFAULT_FORECAST_DAYS = 7


class Location(BaseModel):
    """A point on the globe, supplied per request."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)

    @property
    def azimuth(self) -> float:
        """Equator-facing azimuth: south (180) north of the equator, else north (0)."""
        return 180.0 if self.lat >= 0 else 0.0

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}


class NamedLocation(Location):
    """A location to compare, optionally labelled by the caller."""

    name: str | None = None


class SystemConfig(BaseModel):
    """PV system parameters for one PVWatts simulation."""

    model_config = ConfigDict(frozen=True)

    capacity_kw: float = Field(default=DEFAULT_CAPACITY_KW, ge=0.05, le=500000)
    tilt_deg: float = Field(ge=0, le=90)
    azimuth_deg: float = Field(default=180, ge=0, le=360)
    module_type: Literal["standard", "premium", "thinfilm"] = "standard"
    losses_percent: float = Field(default=14, ge=0, le=99)

    @classmethod
    def for_location(cls, lat: float, **kwargs: object) -> "SystemConfig":
        """Build a config whose tilt defaults to ``|lat|`` when not given."""
        if kwargs.get("tilt_deg") is None:
            kwargs["tilt_deg"] = abs(lat)
        kwargs = {k: v for k, v in kwargs.items() if v is not None}
        return cls(**kwargs)

    @property
    def module_type_code(self) -> int:
        """PVWatts ``module_type`` integer code."""
        return MODULE_TYPE_CODES[self.module_type]

    def to_dict(self) -> dict[str, object]:
        return {
            "capacityKW": self.capacity_kw,
            "tiltDegrees": self.tilt_deg,
            "azimuthDegrees": self.azimuth_deg,
            "moduleType": self.module_type,
            "lossesPercent": self.losses_percent,
        }


class ForecastRequest(Location):
    """Radiation forecast request."""

    forecast_days: int = Field(default=DEFAULT_FORECAST_DAYS, ge=1, le=16)


class CapacityRequest(Location):
    """Optimal tilt request."""

    capacity_kw: float = Field(default=DEFAULT_CAPACITY_KW, ge=0.05, le=500000)


class CompareRequest(BaseModel):
    """Multi-location comparison request."""

    locations: list[NamedLocation] = Field(min_length=2, max_length=5)
    capacity_kw: float = Field(default=DEFAULT_CAPACITY_KW, ge=0.05, le=500000)

    @model_validator(mode="after")
    def fill_names(self) -> "CompareRequest":
        """Name unlabelled locations "Location {n}" by 1-based position."""
        self.locations = [
            loc if loc.name else loc.model_copy(update={"name": f"Location {idx + 1}"})
            for idx, loc in enumerate(self.locations)
        ]
        return self
