"""Go / no-go recommendations for outdoor field operations.

The engine looks at the current risk level, the first day of forecast steps
and the wind speed (a proxy for pollutant dispersion). Each recommendation
carries an explicit decision; the message text keeps the marker words
(``UNSAFE``, ``NOT recommended``, ``CAUTION``, ``WAIT``) that older
consumers used to infer the decision from the text.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from ..utils.dates import hours_until
from .forecast import ForecastPoint, forecast_window
from .limits import DEFAULT_CONFIG, RiskConfig
from .risk import get_risk_level

Decision = Literal["GO", "CONDITIONAL", "NO-GO"]


@dataclass(frozen=True)
class Recommendation:
    decision: Decision
    message: str
    eta_hours: Optional[int] = None


def get_smart_recommendation(
    current_ers: float,
    forecast: Sequence[ForecastPoint],
    current_wind_speed: float,
    config: RiskConfig = DEFAULT_CONFIG,
    now: Optional[float] = None,
) -> Recommendation:
    """Recommend whether field work should go ahead.

    Args:
        current_ers: Current Environmental Risk Score (0-100).
        forecast: Forecast points in chronological order; only the leading
            points covering ``config.forecast_horizon_hours`` are used.
        current_wind_speed: Current wind speed in m/s.
        config: Thresholds and forecast horizon.
        now: Reference time in epoch seconds, defaults to the current time.

    Returns:
        A ``Recommendation``. An empty forecast falls back to the current
        risk level alone, without trend analysis.
    """
    now = time.time() if now is None else now
    risk_level = get_risk_level(current_ers, config)
    medium_wind = config.wind_thresholds["medium"]
    high_wind = config.wind_thresholds["high"]

    window = forecast_window(forecast, config)
    if window:
        avg_future_ers: Optional[float] = sum(point.ers for point in window) / len(window)
        avg_future_wind: Optional[float] = sum(point.wind_speed for point in window) / len(window)
        safe_windows = [
            point
            for point in window
            if point.ers <= config.low_risk_max and point.wind_speed >= medium_wind
        ]
    else:
        avg_future_ers = avg_future_wind = None
        safe_windows = []

    if risk_level == "high":
        if safe_windows:
            hours = hours_until(safe_windows[0].timestamp, now)
            return Recommendation(
                "NO-GO",
                "⚠️ UNSAFE - High Risk Detected. Operations NOT recommended. "
                f"Air quality expected to improve in approximately {hours} hours. "
                "Consider postponing field work until conditions improve.",
                eta_hours=hours,
            )
        return Recommendation(
            "NO-GO",
            "⛔ UNSAFE - High Risk Detected. Current conditions pose significant safety concerns. "
            f"No improvement expected in the next {config.forecast_horizon_hours} hours. "
            "Recommend postponing all non-essential field operations.",
        )

    if risk_level == "moderate":
        if (
            avg_future_wind is not None
            and current_wind_speed >= medium_wind
            and avg_future_wind >= medium_wind
        ):
            return Recommendation(
                "CONDITIONAL",
                "⚡ PROCEED WITH CAUTION - Moderate risk levels detected. "
                f"Wind conditions ({current_wind_speed:.1f} m/s) support pollutant dispersion. "
                "Limit exposure time and monitor conditions closely.",
            )
        if avg_future_ers is not None and avg_future_ers < current_ers:
            return Recommendation(
                "CONDITIONAL",
                "⏳ WAIT RECOMMENDED - Moderate risk with improving trends. "
                "Air quality expected to improve over the next 6-12 hours. "
                "Consider delaying start time for safer conditions.",
            )
        return Recommendation(
            "CONDITIONAL",
            "⚡ PROCEED WITH CAUTION - Moderate risk levels. Implement enhanced safety protocols, "
            "limit prolonged outdoor exposure, and monitor real-time conditions.",
        )

    if current_wind_speed >= high_wind:
        return Recommendation(
            "GO",
            "✅ SAFE TO PROCEED - Low risk conditions with excellent wind dispersion "
            f"({current_wind_speed:.1f} m/s). Ideal conditions for field operations. "
            "Standard safety protocols apply.",
        )
    # Deterioration warning kicks in above 40, inside the moderate band.
    if avg_future_ers is not None and avg_future_ers > 40:
        return Recommendation(
            "GO",
            "✅ SAFE NOW - Current conditions are favorable, but air quality may deteriorate "
            "within 12-18 hours. Plan to complete operations within optimal window.",
        )
    return Recommendation(
        "GO",
        "✅ SAFE TO PROCEED - Low risk conditions detected. Air quality is within acceptable "
        "limits for field operations. Maintain standard safety protocols.",
    )
