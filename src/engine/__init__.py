"""Solar estimation and comparison engine."""

from src.engine.comparator import compare_locations, rank_entries
from src.engine.forecast import aggregate_daily, build_forecast
from src.engine.normalizers import (
    extract_annual_averages,
    normalize_pv_output,
    normalize_resource,
)
from src.engine.rating import rate
from src.engine.tilt import search_optimal_tilt, select_best, theoretical_tilt

__all__ = [
    "aggregate_daily",
    "build_forecast",
    "compare_locations",
    "extract_annual_averages",
    "normalize_pv_output",
    "normalize_resource",
    "rank_entries",
    "rate",
    "search_optimal_tilt",
    "select_best",
    "theoretical_tilt",
]
