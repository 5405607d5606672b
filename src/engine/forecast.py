"""Daily aggregation of hourly radiation forecasts."""

from typing import Any

import pandas as pd

from src.engine.models import ForecastDay, RadiationForecast
from src.providers.schemas import ForecastResponse, parse_payload
from src.utils.exceptions import MalformedResponseError
from src.utils.logger import get_logger
from src.utils.rounding import round_half_up, round_int

logger = get_logger(__name__)

HOURS_PER_DAY = 24
SECONDS_PER_HOUR = 3600


def aggregate_daily(
    shortwave: list[float | None],
    daily_times: list[str],
    sunshine_duration: list[float | None],
    forecast_days: int,
) -> list[ForecastDay]:
    """Reduce hourly shortwave radiation to per-day peak/mean summaries.

    Day ``d`` covers hourly samples ``[d*24, d*24 + 24)``. Null samples are
    dropped; a day with no samples left is omitted from the result.

    Args:
        shortwave: Hourly shortwave radiation in W/m2, nulls allowed.
        daily_times: Calendar date for each forecast day.
        sunshine_duration: Daily sunshine duration in seconds.
        forecast_days: Number of days requested.

    Returns:
        One ForecastDay per day that has at least one sample.

    Raises:
        MalformedResponseError: If daily series are shorter than needed.
    """
    hourly = pd.Series(shortwave, dtype="float64")
    days: list[ForecastDay] = []

    for day in range(forecast_days):
        start = day * HOURS_PER_DAY
        samples = hourly.iloc[start : start + HOURS_PER_DAY].dropna()

        if samples.empty:
            logger.debug(f"Forecast day {day}: no radiation samples, skipped")
            continue

        if day >= len(daily_times) or day >= len(sunshine_duration):
            raise MalformedResponseError(
                "Open-Meteo daily series shorter than forecast window",
                context={"api": "Open-Meteo", "day": day, "forecast_days": forecast_days},
            )

        sunshine_s = sunshine_duration[day] or 0.0
        days.append(
            ForecastDay(
                date=daily_times[day],
                peak_radiation_wm2=float(samples.max()),
                avg_radiation_wm2=round_int(float(samples.mean())),
                sunshine_duration_hours=round_half_up(sunshine_s / SECONDS_PER_HOUR, 1),
            )
        )

    return days


def build_forecast(raw: Any, forecast_days: int) -> RadiationForecast:
    """Validate an Open-Meteo payload and summarise it by day.

    Raises:
        MalformedResponseError: If the payload lacks the requested series.
    """
    response = parse_payload(ForecastResponse, raw, api="Open-Meteo")
    hourly = response.hourly

    daily = aggregate_daily(
        hourly.shortwave_radiation,
        response.daily.time,
        response.daily.sunshine_duration,
        forecast_days,
    )
    logger.info(f"Aggregated {len(daily)} of {forecast_days} forecast days")

    return RadiationForecast(
        timezone=response.timezone,
        forecast_days=forecast_days,
        daily=daily,
        hourly={
            "times": hourly.time,
            "directRadiation_Wm2": hourly.direct_radiation,
            "diffuseRadiation_Wm2": hourly.diffuse_radiation,
            "directNormalIrradiance_Wm2": hourly.direct_normal_irradiance,
            "shortwaveRadiation_Wm2": hourly.shortwave_radiation,
        },
    )
