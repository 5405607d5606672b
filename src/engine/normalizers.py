"""Map validated provider payloads onto engine records."""

from typing import Any

from src.engine.models import MonthlySeries, PVOutput, ResourceData
from src.providers.schemas import PVWattsResponse, SolarResourceResponse, parse_payload
from src.utils.rounding import round_half_up, round_int


def normalize_pv_output(raw: Any) -> PVOutput:
    """Build a PVOutput from a PVWatts payload.

    Raises:
        MalformedResponseError: If outputs or a 12-month array are missing.
    """
    outputs = parse_payload(PVWattsResponse, raw, api="PVWatts").outputs
    return PVOutput(
        ac_annual_kwh=round_int(outputs.ac_annual),
        capacity_factor=round_half_up(outputs.capacity_factor, 2),
        solar_radiation_annual=round_half_up(outputs.solrad_annual, 2),
        ac_monthly_kwh=[round_int(v) for v in outputs.ac_monthly],
        solar_radiation_monthly=[round_half_up(v, 2) for v in outputs.solrad_monthly],
        ac_annual_raw=outputs.ac_annual,
    )


def normalize_resource(raw: Any) -> ResourceData:
    """Build ResourceData from a Solar Resource payload.

    Annual values are the provider's own, not recomputed from months.

    Raises:
        MalformedResponseError: If any irradiance block is missing.
    """
    outputs = parse_payload(SolarResourceResponse, raw, api="NREL Solar Resource").outputs
    return ResourceData(
        avg_ghi=MonthlySeries(annual=outputs.avg_ghi.annual, monthly=outputs.avg_ghi.monthly),
        avg_dni=MonthlySeries(annual=outputs.avg_dni.annual, monthly=outputs.avg_dni.monthly),
        avg_lat_tilt=MonthlySeries(
            annual=outputs.avg_lat_tilt.annual, monthly=outputs.avg_lat_tilt.monthly
        ),
    )


def _annual_or_zero(outputs: dict[str, Any], key: str) -> float:
    block = outputs.get(key)
    if not isinstance(block, dict):
        return 0.0
    annual = block.get("annual")
    if isinstance(annual, bool) or not isinstance(annual, (int, float)):
        return 0.0
    return float(annual)


def extract_annual_averages(raw: Any) -> tuple[float, float]:
    """Read annual (GHI, DNI) leniently for the overview.

    NREL answers ``"no data"`` for locations outside its coverage; those
    read as 0.0 rather than failing.
    """
    outputs = raw.get("outputs") if isinstance(raw, dict) else None
    if not isinstance(outputs, dict):
        return 0.0, 0.0
    return _annual_or_zero(outputs, "avg_ghi"), _annual_or_zero(outputs, "avg_dni")
