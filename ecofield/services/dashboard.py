"""Fetch one city's snapshot and run it through the risk engine."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from ..data.cities import City
from ..data.openweather import OpenWeatherClient
from .compliance import ComplianceEntry, check_compliance
from .forecast import ForecastPoint, build_forecast
from .limits import DEFAULT_CONFIG, RiskConfig
from .recommendation import Recommendation, get_smart_recommendation
from .risk import PollutantReading, RiskLevel, calculate_risk_score, get_risk_level

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurrentConditions:
    temperature: float
    wind_speed: float
    humidity: float
    description: str
    icon: str
    aqi: int
    reading: PollutantReading


@dataclass(frozen=True)
class DashboardData:
    city: City
    current: CurrentConditions
    forecast: List[ForecastPoint]
    compliance: List[ComplianceEntry]
    ers: int
    risk_level: RiskLevel
    recommendation: Recommendation


def parse_current(weather_payload: dict, pollution_payload: dict) -> CurrentConditions:
    pollution = pollution_payload["list"][0]
    weather = (weather_payload.get("weather") or [{}])[0]
    return CurrentConditions(
        temperature=float(weather_payload["main"]["temp"]),
        wind_speed=float(weather_payload["wind"]["speed"]),
        humidity=float(weather_payload["main"]["humidity"]),
        description=weather.get("description", ""),
        icon=weather.get("icon", ""),
        aqi=int(pollution["main"]["aqi"]),
        reading=PollutantReading.from_components(pollution["components"]),
    )


def build_dashboard(
    city: City,
    client: OpenWeatherClient,
    config: RiskConfig = DEFAULT_CONFIG,
    now: Optional[float] = None,
) -> DashboardData:
    """Fetch all four provider payloads concurrently and evaluate them.

    Any failed request propagates; nothing is evaluated on a partial snapshot.
    """
    LOGGER.info("Refreshing dashboard for %s", city.name)
    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [
            pool.submit(client.current_weather, city.lat, city.lon),
            pool.submit(client.current_pollution, city.lat, city.lon),
            pool.submit(client.pollution_forecast, city.lat, city.lon),
            pool.submit(client.weather_forecast, city.lat, city.lon),
        ]
        current_weather, current_pollution, pollution_forecast, weather_forecast = [
            future.result() for future in futures
        ]

    current = parse_current(current_weather, current_pollution)
    ers = calculate_risk_score(current.reading, config)
    forecast = build_forecast(pollution_forecast, weather_forecast, config)
    recommendation = get_smart_recommendation(ers, forecast, current.wind_speed, config, now=now)
    LOGGER.info(
        "%s: ERS=%d decision=%s (%d forecast steps)",
        city.name,
        ers,
        recommendation.decision,
        len(forecast),
    )
    return DashboardData(
        city=city,
        current=current,
        forecast=forecast,
        compliance=check_compliance(current.reading, config),
        ers=ers,
        risk_level=get_risk_level(ers, config),
        recommendation=recommendation,
    )
