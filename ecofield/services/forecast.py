"""Assemble per-step forecast points from provider pollution and weather series."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import pandas as pd

from ..utils.dates import format_time
from .limits import DEFAULT_CONFIG, RiskConfig
from .risk import PollutantReading, calculate_risk_score

LOGGER = logging.getLogger(__name__)

FRAME_COLUMNS = ["timestamp", "time", "pm2_5", "no2", "o3", "ers", "wind_speed", "aqi"]


@dataclass(frozen=True)
class ForecastPoint:
    timestamp: int
    reading: PollutantReading
    wind_speed: float
    ers: int
    aqi: Optional[int] = None


def build_forecast(
    pollution_payload: dict,
    weather_payload: dict,
    config: RiskConfig = DEFAULT_CONFIG,
) -> List[ForecastPoint]:
    """Pair pollution and weather forecast steps by list position.

    The two series come from separate endpoints with different spacing, so
    this is an approximation rather than a timestamp join. When the weather
    series is shorter, its first entry stands in for the missing steps.
    """
    pollution = pollution_payload.get("list", [])
    weather = weather_payload.get("list", [])
    if len(weather) < len(pollution):
        LOGGER.debug(
            "Weather forecast has %d steps for %d pollution steps; padding with first entry",
            len(weather),
            len(pollution),
        )

    points: List[ForecastPoint] = []
    for index, item in enumerate(pollution):
        weather_item = weather[index] if index < len(weather) else (weather[0] if weather else {})
        reading = PollutantReading.from_components(item.get("components", {}))
        points.append(
            ForecastPoint(
                timestamp=int(item["dt"]),
                reading=reading,
                wind_speed=float(weather_item.get("wind", {}).get("speed", 0.0)),
                ers=calculate_risk_score(reading, config),
                aqi=item.get("main", {}).get("aqi"),
            )
        )
    return points


def forecast_window(
    points: Sequence[ForecastPoint],
    config: RiskConfig = DEFAULT_CONFIG,
) -> List[ForecastPoint]:
    """Return the leading points that cover the configured horizon."""
    return list(points[: min(config.window_size, len(points))])


def forecast_frame(points: Sequence[ForecastPoint]) -> pd.DataFrame:
    if not points:
        return pd.DataFrame(columns=FRAME_COLUMNS)
    rows = [
        {
            "timestamp": pd.to_datetime(point.timestamp, unit="s", utc=True),
            "time": format_time(point.timestamp),
            "pm2_5": point.reading.pm2_5,
            "no2": point.reading.no2,
            "o3": point.reading.o3,
            "ers": point.ers,
            "wind_speed": point.wind_speed,
            "aqi": point.aqi,
        }
        for point in points
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)
