"""Access OpenWeatherMap current conditions, air pollution and forecasts."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

from ..utils.config import load_openweather_api_key

LOGGER = logging.getLogger(__name__)

OPENWEATHER_BASE_URL = "https://api.openweathermap.org"
REQUEST_TIMEOUT = 10


class OpenWeatherClient:
    """Thin wrapper around the four OpenWeatherMap endpoints the dashboard needs."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = OPENWEATHER_BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key or load_openweather_api_key()
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()

    def _request(self, endpoint: str, params: Dict[str, object]) -> dict:
        query = dict(params)
        query["appid"] = self.api_key
        LOGGER.debug("Requesting OpenWeather %s lat=%s lon=%s", endpoint, params.get("lat"), params.get("lon"))
        response = self.session.get(f"{self.base_url}{endpoint}", params=query, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
        return response.json()

    def current_weather(self, lat: float, lon: float) -> dict:
        return self._request("/data/2.5/weather", {"lat": lat, "lon": lon, "units": "metric"})

    def current_pollution(self, lat: float, lon: float) -> dict:
        return self._request("/data/2.5/air_pollution", {"lat": lat, "lon": lon})

    def pollution_forecast(self, lat: float, lon: float) -> dict:
        """Hourly air pollution forecast for the next four days."""
        return self._request("/data/2.5/air_pollution/forecast", {"lat": lat, "lon": lon})

    def weather_forecast(self, lat: float, lon: float) -> dict:
        """Five-day weather forecast at three-hour spacing."""
        return self._request("/data/2.5/forecast", {"lat": lat, "lon": lon, "units": "metric"})
