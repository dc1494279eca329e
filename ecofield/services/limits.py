"""Regulatory limits, score weights and thresholds used by the risk engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict


@dataclass(frozen=True)
class RegulatoryLimit:
    key: str
    name: str
    limit: float
    unit: str


# CAAQS / WHO guideline ceilings, canonical pollutant order.
REGULATORY_LIMITS: Dict[str, RegulatoryLimit] = {
    "pm2_5": RegulatoryLimit("pm2_5", "PM2.5", 25, "µg/m³"),  # WHO 24-hour
    "no2": RegulatoryLimit("no2", "NO₂", 200, "µg/m³"),  # WHO 1-hour
    "o3": RegulatoryLimit("o3", "O₃", 100, "µg/m³"),  # WHO 8-hour
    "co": RegulatoryLimit("co", "CO", 4000, "µg/m³"),  # 4 mg/m³, WHO 8-hour
    "so2": RegulatoryLimit("so2", "SO₂", 500, "µg/m³"),  # WHO 10-minute
}

RISK_WEIGHTS: Dict[str, float] = {
    "pm2_5": 0.35,
    "no2": 0.25,
    "o3": 0.25,
    "co": 0.10,
    "so2": 0.05,
}

# Wind speed (m/s) needed for poor / moderate / good dispersion.
WIND_THRESHOLDS: Dict[str, float] = {
    "low": 2,
    "medium": 4,
    "high": 6,
}


@dataclass(frozen=True)
class RiskConfig:
    """Everything the scorer, checker and recommendation engine depend on."""

    limits: Dict[str, RegulatoryLimit] = field(default_factory=lambda: dict(REGULATORY_LIMITS))
    weights: Dict[str, float] = field(default_factory=lambda: dict(RISK_WEIGHTS))
    wind_thresholds: Dict[str, float] = field(default_factory=lambda: dict(WIND_THRESHOLDS))
    low_risk_max: float = 30
    moderate_risk_max: float = 60
    safe_compliance_max: float = 50
    warning_compliance_max: float = 80
    forecast_horizon_hours: int = 24
    forecast_interval_hours: int = 3

    @property
    def window_size(self) -> int:
        return max(self.forecast_horizon_hours // self.forecast_interval_hours, 0)

    def with_horizon(self, hours: int) -> "RiskConfig":
        return replace(self, forecast_horizon_hours=hours)


DEFAULT_CONFIG = RiskConfig()
