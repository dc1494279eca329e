"""Labels and headline summaries for the dashboard."""

from __future__ import annotations

from typing import Dict

from .compliance import exceedances
from .dashboard import DashboardData

AQI_DESCRIPTIONS = ["Excellent", "Good", "Moderate", "Poor", "Very Poor"]

RISK_COLORS: Dict[str, str] = {
    "low": "#7CAB48",
    "moderate": "#D4AF37",
    "high": "#C25B52",
}

DECISION_COLORS: Dict[str, str] = {
    "GO": "#7CAB48",
    "CONDITIONAL": "#D4AF37",
    "NO-GO": "#C25B52",
}


def describe_aqi(aqi: int) -> str:
    """Describe the provider's 1-5 air quality index."""
    if 1 <= aqi <= len(AQI_DESCRIPTIONS):
        return AQI_DESCRIPTIONS[aqi - 1]
    return "Unknown"


def risk_color(level: str) -> str:
    return RISK_COLORS[level]


def decision_color(decision: str) -> str:
    return DECISION_COLORS[decision]


def summarize_dashboard(data: DashboardData) -> Dict[str, object]:
    over_limit = exceedances(data.compliance)
    return {
        "city": data.city.name,
        "ers": data.ers,
        "risk_level": data.risk_level,
        "decision": data.recommendation.decision,
        "eta_hours": data.recommendation.eta_hours,
        "aqi_label": describe_aqi(data.current.aqi),
        "over_limit": [entry.pollutant for entry in over_limit],
        "forecast_steps": len(data.forecast),
    }
