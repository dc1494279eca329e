"""Regulatory compliance breakdown per pollutant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Literal

from .limits import DEFAULT_CONFIG, RiskConfig
from .risk import PollutantReading, percent_of_limit

ComplianceStatus = Literal["safe", "warning", "danger"]


@dataclass(frozen=True)
class ComplianceEntry:
    key: str
    pollutant: str
    current: float
    limit: float
    unit: str
    percentage: float
    raw_percentage: float
    status: ComplianceStatus


def classify_percentage(percentage: float, config: RiskConfig = DEFAULT_CONFIG) -> ComplianceStatus:
    if percentage <= config.safe_compliance_max:
        return "safe"
    if percentage <= config.warning_compliance_max:
        return "warning"
    return "danger"


def check_compliance(
    reading: PollutantReading,
    config: RiskConfig = DEFAULT_CONFIG,
) -> List[ComplianceEntry]:
    """Compare each pollutant with its limit, in canonical pollutant order.

    ``percentage`` is capped at 100 so display bars never overflow, while the
    status is derived from the uncapped value so a reading far above its limit
    still reports ``danger``.
    """
    values = reading.as_dict()
    entries: List[ComplianceEntry] = []
    for key, limit in config.limits.items():
        value = values[key]
        raw = percent_of_limit(value, limit.limit)
        entries.append(
            ComplianceEntry(
                key=key,
                pollutant=limit.name,
                current=value,
                limit=limit.limit,
                unit=limit.unit,
                percentage=min(raw, 100.0),
                raw_percentage=raw,
                status=classify_percentage(raw, config),
            )
        )
    return entries


def exceedances(entries: Iterable[ComplianceEntry]) -> List[ComplianceEntry]:
    return [entry for entry in entries if entry.raw_percentage > 100]
