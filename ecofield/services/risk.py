"""Environmental Risk Score (ERS) calculation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Dict, Literal, Mapping

from .limits import DEFAULT_CONFIG, RiskConfig

RiskLevel = Literal["low", "moderate", "high"]


@dataclass(frozen=True)
class PollutantReading:
    """Concentrations in µg/m³ for the five tracked pollutants."""

    pm2_5: float
    no2: float
    o3: float
    co: float
    so2: float

    @classmethod
    def from_components(cls, components: Mapping[str, float]) -> "PollutantReading":
        """Build a reading from a provider ``components`` block (extra keys are ignored)."""
        return cls(
            pm2_5=float(components.get("pm2_5", 0.0)),
            no2=float(components.get("no2", 0.0)),
            o3=float(components.get("o3", 0.0)),
            co=float(components.get("co", 0.0)),
            so2=float(components.get("so2", 0.0)),
        )

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def percent_of_limit(value: float, limit: float) -> float:
    return value * 100.0 / limit


def calculate_risk_score(reading: PollutantReading, config: RiskConfig = DEFAULT_CONFIG) -> int:
    """Return the weighted percent-of-limit score, rounded and capped at 100.

    0-30 is low risk, 31-60 moderate and 61-100 high.
    """
    values = reading.as_dict()
    ers = sum(
        percent_of_limit(values[key], limit.limit) * config.weights[key]
        for key, limit in config.limits.items()
    )
    return min(round_half_up(ers), 100)


def get_risk_level(ers: float, config: RiskConfig = DEFAULT_CONFIG) -> RiskLevel:
    if ers <= config.low_risk_max:
        return "low"
    if ers <= config.moderate_risk_max:
        return "moderate"
    return "high"
