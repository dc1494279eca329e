"""
Pytest configuration for EcoField tests.

Provides shared readings and a forecast point factory.
"""

import pytest

from ecofield.services.forecast import ForecastPoint
from ecofield.services.risk import PollutantReading

NOW = 1_700_000_000


@pytest.fixture
def clean_reading():
    """Fixture providing a reading with no pollution at all."""
    return PollutantReading(pm2_5=0, no2=0, o3=0, co=0, so2=0)


@pytest.fixture
def at_limit_reading():
    """Fixture providing a reading with every pollutant exactly at its limit."""
    return PollutantReading(pm2_5=25, no2=200, o3=100, co=4000, so2=500)


@pytest.fixture
def make_point(clean_reading):
    """Fixture returning a factory for forecast points three hours apart."""
    def _make(index, ers=10, wind_speed=3.0, aqi=None):
        return ForecastPoint(
            timestamp=NOW + (index + 1) * 3 * 3600,
            reading=clean_reading,
            wind_speed=wind_speed,
            ers=ers,
            aqi=aqi,
        )
    return _make
