"""Side-by-side PV yield comparison of candidate sites."""

from typing import Any, Protocol

from src.config.schema import NamedLocation, SystemConfig
from src.engine.models import ComparisonEntry, ComparisonResult
from src.engine.normalizers import normalize_pv_output, normalize_resource
from src.utils.concurrency import join_all
from src.utils.logger import get_logger
from src.utils.rounding import round_int

logger = get_logger(__name__)


class NRELSource(Protocol):
    async def fetch_pvwatts(self, lat: float, lon: float, system: SystemConfig) -> Any: ...

    async def fetch_solar_resource(self, lat: float, lon: float) -> Any: ...


async def _evaluate_location(
    client: NRELSource, location: NamedLocation, index: int, capacity_kw: float
) -> ComparisonEntry:
    system = SystemConfig(
        capacity_kw=capacity_kw,
        tilt_deg=abs(location.lat),
        azimuth_deg=location.azimuth,
    )
    pv_raw, resource_raw = await join_all(
        [
            client.fetch_pvwatts(location.lat, location.lon, system),
            client.fetch_solar_resource(location.lat, location.lon),
        ],
        label=f"compare-location-{index + 1}",
    )
    pv = normalize_pv_output(pv_raw)
    resource = normalize_resource(resource_raw)

    return ComparisonEntry(
        name=location.name or f"Location {index + 1}",
        location=location,
        annual_output_kwh=pv.ac_annual_kwh,
        capacity_factor=pv.capacity_factor,
        avg_ghi=resource.avg_ghi.annual,
        avg_dni=resource.avg_dni.annual,
    )


def rank_entries(entries: list[ComparisonEntry]) -> ComparisonResult:
    """Rank entries by annual output, best first.

    Ties keep their input order. ``vs_top_percent`` is the shortfall against
    the leader in whole percent; a zero-output leader gives 0 for everyone.
    """
    ranked = sorted(entries, key=lambda e: e.annual_output_kwh, reverse=True)
    top_output = ranked[0].annual_output_kwh

    for position, entry in enumerate(ranked):
        entry.rank = position + 1
        if position == 0 or top_output == 0:
            entry.vs_top_percent = 0
        else:
            entry.vs_top_percent = round_int(
                (top_output - entry.annual_output_kwh) / top_output * 100
            )

    return ComparisonResult(ranked=ranked)


async def compare_locations(
    client: NRELSource, locations: list[NamedLocation], capacity_kw: float
) -> ComparisonResult:
    """Evaluate every location concurrently and rank the results.

    Each location gets an equator-facing array tilted at its latitude. A
    single failed call fails the whole comparison.

    Args:
        client: Source of PVWatts and Solar Resource payloads.
        locations: Two to five locations, in caller order.
        capacity_kw: DC system capacity in kW, shared by all sites.

    Returns:
        ComparisonResult ranked by annual output.
    """
    logger.info(f"Comparing {len(locations)} locations at {capacity_kw} kW")

    entries = await join_all(
        (
            _evaluate_location(client, location, idx, capacity_kw)
            for idx, location in enumerate(locations)
        ),
        label="compare-locations",
    )

    result = rank_entries(entries)
    logger.info(
        f"Best location: {result.best_location} "
        f"({result.ranked[0].annual_output_kwh} kWh/yr)"
    )
    return result
