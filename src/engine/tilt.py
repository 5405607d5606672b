"""Panel tilt heuristics and the PVWatts-backed optimal tilt search."""

from typing import Any, Protocol

from src.config.schema import Location, SystemConfig
from src.engine.models import TheoreticalTilt, TiltCandidate, TiltSearchResult
from src.engine.normalizers import normalize_pv_output
from src.utils.concurrency import join_all
from src.utils.logger import get_logger
from src.utils.rounding import round_int

logger = get_logger(__name__)

MIN_TILT = 0
MAX_TILT = 90
TILT_STEP = 10


class PVWattsSource(Protocol):
    async def fetch_pvwatts(self, lat: float, lon: float, system: SystemConfig) -> Any: ...


def theoretical_tilt(lat: float) -> TheoreticalTilt:
    """Rule-of-thumb tilts for a latitude.

    Year-round tilt is 90% of the absolute latitude; summer and winter are
    15 degrees either side of it. Summer/winter are not clamped and can
    leave [0, 90] at extreme latitudes.
    """
    abs_lat = abs(lat)
    return TheoreticalTilt(
        annual=round_int(abs_lat * 0.9),
        summer=round_int(abs_lat - 15),
        winter=round_int(abs_lat + 15),
    )


def clamp(value: int, low: int = MIN_TILT, high: int = MAX_TILT) -> int:
    return max(low, min(high, value))


def candidate_tilts(theoretical: TheoreticalTilt) -> list[int]:
    """Low, mid and high whole-degree tilts around the year-round value (not deduplicated)."""
    return [
        clamp(theoretical.annual - TILT_STEP),
        theoretical.annual,
        clamp(theoretical.annual + TILT_STEP),
    ]


def select_best(candidates: list[TiltCandidate]) -> TiltCandidate:
    """Highest unrounded annual output; on a tie the later candidate wins."""
    best = candidates[0]
    for candidate in candidates[1:]:
        if candidate.annual_output_raw >= best.annual_output_raw:
            best = candidate
    return best


async def _simulate_tilt(
    client: PVWattsSource, location: Location, capacity_kw: float, tilt: int
) -> TiltCandidate:
    system = SystemConfig(capacity_kw=capacity_kw, tilt_deg=tilt, azimuth_deg=location.azimuth)
    raw = await client.fetch_pvwatts(location.lat, location.lon, system)
    output = normalize_pv_output(raw)
    return TiltCandidate(tilt_deg=tilt, annual_output_raw=output.ac_annual_raw)


async def search_optimal_tilt(
    client: PVWattsSource, location: Location, capacity_kw: float
) -> TiltSearchResult:
    """Simulate three candidate tilts concurrently and keep the best.

    Azimuth is fixed to face the equator and is not searched. Any failed
    simulation fails the whole search.

    Args:
        client: Source of PVWatts payloads.
        location: Site location.
        capacity_kw: DC system capacity in kW.

    Returns:
        TiltSearchResult with the winner, the full comparison table and the
        unclamped seasonal tilts.
    """
    theoretical = theoretical_tilt(location.lat)
    azimuth = location.azimuth
    tilts = candidate_tilts(theoretical)
    logger.info(
        f"Searching optimal tilt for ({location.lat}, {location.lon}): "
        f"candidates={tilts}, azimuth={azimuth}"
    )

    candidates = await join_all(
        (_simulate_tilt(client, location, capacity_kw, tilt) for tilt in tilts),
        label="tilt-search",
    )

    best = select_best(candidates)
    logger.info(
        f"Optimal tilt for ({location.lat}, {location.lon}): {best.tilt_deg} deg, "
        f"{best.annual_output_kwh} kWh/yr"
    )
    return TiltSearchResult(
        best=best,
        azimuth_deg=azimuth,
        theoretical=theoretical,
        candidates=candidates,
    )
