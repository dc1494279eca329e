"""Configuration helpers for credentials and defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from ..services.limits import DEFAULT_CONFIG, RiskConfig


def _read_setting(name: str, env_path: Path | None = None) -> Optional[str]:
    value = os.environ.get(name)
    if value:
        return value
    env_path = env_path or Path(".env")
    if env_path.exists():
        return dotenv_values(str(env_path)).get(name)
    return None


def load_openweather_api_key(env_path: Path | None = None) -> str:
    """Load the OpenWeatherMap key from the environment or a .env file."""
    api_key = _read_setting("OPENWEATHER_API_KEY", env_path)
    if not api_key:
        raise RuntimeError("OPENWEATHER_API_KEY must be set in environment variables or .env")
    return api_key


def get_forecast_horizon_hours(env_path: Path | None = None) -> int:
    raw = _read_setting("ECOFIELD_FORECAST_HORIZON_HOURS", env_path)
    if not raw:
        return DEFAULT_CONFIG.forecast_horizon_hours
    try:
        hours = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"ECOFIELD_FORECAST_HORIZON_HOURS must be an integer, got {raw!r}") from exc
    if hours <= 0:
        raise RuntimeError("ECOFIELD_FORECAST_HORIZON_HOURS must be positive")
    return hours


def load_risk_config(env_path: Path | None = None) -> RiskConfig:
    return DEFAULT_CONFIG.with_horizon(get_forecast_horizon_hours(env_path))
