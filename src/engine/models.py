"""Result records produced by the engine."""

from dataclasses import dataclass, field
from typing import Any

from src.config.schema import Location
from src.utils.rounding import round_int


@dataclass(frozen=True)
class TheoreticalTilt:
    """Rule-of-thumb tilt angles in degrees. Summer/winter are unclamped."""

    annual: int
    summer: int
    winter: int

    def to_dict(self) -> dict[str, int]:
        return {"annual": self.annual, "summer": self.summer, "winter": self.winter}


@dataclass(frozen=True)
class MonthlySeries:
    """Annual average with its 12 monthly values, kWh/m2/day."""

    annual: float
    monthly: list[float]

    def to_dict(self) -> dict[str, Any]:
        return {"annual_kWhPerM2PerDay": self.annual, "monthly": list(self.monthly)}


@dataclass(frozen=True)
class ResourceData:
    """Solar resource averages for a location."""

    avg_ghi: MonthlySeries
    avg_dni: MonthlySeries
    avg_lat_tilt: MonthlySeries

    def to_dict(self) -> dict[str, Any]:
        return {
            "directNormalIrradiance": self.avg_dni.to_dict(),
            "globalHorizontalIrradiance": self.avg_ghi.to_dict(),
            "latitudeTiltIrradiance": self.avg_lat_tilt.to_dict(),
        }


@dataclass(frozen=True)
class PVOutput:
    """Canonical PVWatts simulation output.

    ``ac_annual_raw`` keeps the unrounded annual AC output for comparisons.
    """

    ac_annual_kwh: int
    capacity_factor: float
    solar_radiation_annual: float
    ac_monthly_kwh: list[int]
    solar_radiation_monthly: list[float]
    ac_annual_raw: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "annualOutput": {
                "acKWh": self.ac_annual_kwh,
                "capacityFactor": self.capacity_factor,
                "solarRadiation_kWhPerM2PerDay": self.solar_radiation_annual,
            },
            "monthlyOutput_kWh": list(self.ac_monthly_kwh),
            "monthlySolarRadiation": list(self.solar_radiation_monthly),
        }


@dataclass(frozen=True)
class TiltCandidate:
    """One point on the explored tilt/output curve."""

    tilt_deg: int
    annual_output_raw: float

    @property
    def annual_output_kwh(self) -> int:
        return round_int(self.annual_output_raw)

    def to_dict(self) -> dict[str, Any]:
        return {"tiltDegrees": self.tilt_deg, "annualOutput_kWh": self.annual_output_kwh}


@dataclass(frozen=True)
class TiltSearchResult:
    """Outcome of the optimal tilt search."""

    best: TiltCandidate
    azimuth_deg: float
    theoretical: TheoreticalTilt
    candidates: list[TiltCandidate]

    @property
    def azimuth_direction(self) -> str:
        return "South" if self.azimuth_deg == 180 else "North"

    def to_dict(self) -> dict[str, Any]:
        return {
            "optimalConfig": {
                "tiltDegrees": self.best.tilt_deg,
                "azimuthDegrees": self.azimuth_deg,
                "azimuthDirection": self.azimuth_direction,
                "estimatedAnnualOutput_kWh": self.best.annual_output_kwh,
            },
            "seasonalTilts": {
                "summer": self.theoretical.summer,
                "winter": self.theoretical.winter,
                "yearRound": self.theoretical.annual,
            },
            "tiltComparison": [c.to_dict() for c in self.candidates],
        }


@dataclass(frozen=True)
class ForecastDay:
    """Daily radiation summary."""

    date: str
    peak_radiation_wm2: float
    avg_radiation_wm2: int
    sunshine_duration_hours: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "peakRadiation_Wm2": self.peak_radiation_wm2,
            "avgRadiation_Wm2": self.avg_radiation_wm2,
            "sunshineDuration_hours": self.sunshine_duration_hours,
        }


@dataclass(frozen=True)
class RadiationForecast:
    """Daily summaries plus the untouched hourly arrays."""

    timezone: str | None
    forecast_days: int
    daily: list[ForecastDay]
    hourly: dict[str, list[Any]]

    def to_dict(self) -> dict[str, Any]:
        return {
            "timezone": self.timezone,
            "forecastDays": self.forecast_days,
            "dailySummary": [d.to_dict() for d in self.daily],
            "hourlyData": self.hourly,
        }


@dataclass
class ComparisonEntry:
    """Per-location comparison figures; rank fields are set after ranking."""

    name: str
    location: Location
    annual_output_kwh: int
    capacity_factor: float
    avg_ghi: float
    avg_dni: float
    rank: int | None = None
    vs_top_percent: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "rank": self.rank,
            "name": self.name,
            "lat": self.location.lat,
            "lon": self.location.lon,
            "annualOutput_kWh": self.annual_output_kwh,
            "capacityFactor": self.capacity_factor,
            "avgGHI_kWhPerM2PerDay": self.avg_ghi,
            "avgDNI_kWhPerM2PerDay": self.avg_dni,
            "vsTop": self.vs_top_percent,
        }


@dataclass
class ComparisonResult:
    """Ranked comparison across locations."""

    ranked: list[ComparisonEntry] = field(default_factory=list)

    @property
    def best_location(self) -> str:
        return self.ranked[0].name

    @property
    def output_range(self) -> dict[str, int]:
        top = self.ranked[0].annual_output_kwh
        bottom = self.ranked[-1].annual_output_kwh
        return {"min": bottom, "max": top, "difference": top - bottom}

    def to_dict(self) -> dict[str, Any]:
        return {
            "rankedLocations": [e.to_dict() for e in self.ranked],
            "bestLocation": self.best_location,
            "outputRange": self.output_range,
        }
