"""
Tests for forecast assembly.

Tests cover:
- Index pairing of pollution and weather series, with first-entry fallback
- Window sizing against the configured horizon
- Chart frame construction
"""

import pandas as pd

from ecofield.services.forecast import build_forecast, forecast_frame, forecast_window
from ecofield.services.limits import DEFAULT_CONFIG

T0 = 1_700_000_000


def pollution_item(dt, pm2_5=0.0, no2=0.0, o3=0.0, co=0.0, so2=0.0, aqi=1):
    return {
        "dt": dt,
        "main": {"aqi": aqi},
        "components": {"co": co, "no": 0.1, "no2": no2, "o3": o3, "so2": so2, "pm2_5": pm2_5, "pm10": 3.0, "nh3": 0.5},
    }


def weather_item(dt, speed):
    return {"dt": dt, "main": {"temp": 10.0, "humidity": 50}, "wind": {"speed": speed, "deg": 180}}


class TestBuildForecast:
    """Test suite for build_forecast."""

    def test_pairs_by_index(self):
        pollution = {"list": [pollution_item(T0, pm2_5=25, aqi=2), pollution_item(T0 + 3600)]}
        weather = {"list": [weather_item(T0, 3.5), weather_item(T0 + 10800, 6.0)]}
        points = build_forecast(pollution, weather)
        assert [point.wind_speed for point in points] == [3.5, 6.0]
        assert points[0].ers == 35
        assert points[0].aqi == 2
        assert points[0].timestamp == T0
        assert points[0].reading.pm2_5 == 25

    def test_short_weather_series_falls_back_to_first(self):
        pollution = {"list": [pollution_item(T0 + i * 3600) for i in range(4)]}
        weather = {"list": [weather_item(T0, 2.0), weather_item(T0 + 10800, 7.0)]}
        points = build_forecast(pollution, weather)
        assert [point.wind_speed for point in points] == [2.0, 7.0, 2.0, 2.0]

    def test_missing_weather_gives_calm_wind(self):
        points = build_forecast({"list": [pollution_item(T0)]}, {"list": []})
        assert points[0].wind_speed == 0.0

    def test_empty_pollution_series(self):
        assert build_forecast({"list": []}, {"list": [weather_item(T0, 3.0)]}) == []


class TestForecastWindow:
    """Test suite for forecast_window."""

    def test_default_horizon_is_eight_steps(self):
        points = build_forecast({"list": [pollution_item(T0 + i * 3600) for i in range(20)]}, {"list": []})
        assert len(forecast_window(points)) == 8

    def test_fewer_points_than_horizon(self):
        points = build_forecast({"list": [pollution_item(T0 + i * 3600) for i in range(3)]}, {"list": []})
        assert len(forecast_window(points)) == 3

    def test_configured_horizon(self):
        points = build_forecast({"list": [pollution_item(T0 + i * 3600) for i in range(20)]}, {"list": []})
        assert len(forecast_window(points, DEFAULT_CONFIG.with_horizon(12))) == 4


class TestForecastFrame:
    """Test suite for forecast_frame."""

    def test_columns_and_values(self):
        points = build_forecast({"list": [pollution_item(T0, no2=40, o3=60)]}, {"list": [weather_item(T0, 4.0)]})
        frame = forecast_frame(points)
        assert list(frame.columns) == ["timestamp", "time", "pm2_5", "no2", "o3", "ers", "wind_speed", "aqi"]
        assert frame.loc[0, "no2"] == 40
        assert frame.loc[0, "wind_speed"] == 4.0
        assert frame.loc[0, "timestamp"] == pd.Timestamp(T0, unit="s", tz="UTC")

    def test_empty(self):
        frame = forecast_frame([])
        assert frame.empty
        assert "ers" in frame.columns
