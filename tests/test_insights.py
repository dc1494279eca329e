"""
Tests for dashboard labels, time helpers and the city list.
"""

import pytest

from ecofield.data.cities import CITIES, get_city
from ecofield.services.insights import decision_color, describe_aqi, risk_color
from ecofield.utils.dates import format_time, hours_until


class TestDescribeAqi:
    @pytest.mark.parametrize(
        "aqi, label",
        [(1, "Excellent"), (2, "Good"), (3, "Moderate"), (4, "Poor"), (5, "Very Poor"), (0, "Unknown"), (6, "Unknown")],
    )
    def test_labels(self, aqi, label):
        assert describe_aqi(aqi) == label


class TestColors:
    def test_risk_and_decision_share_palette(self):
        assert risk_color("low") == decision_color("GO")
        assert risk_color("moderate") == decision_color("CONDITIONAL")
        assert risk_color("high") == decision_color("NO-GO")


class TestDates:
    def test_format_time_utc(self):
        # 2023-11-14 22:13:20 UTC
        assert format_time(1_700_000_000) == "10:13 PM"

    def test_hours_until_rounds_half_up(self):
        assert hours_until(1000 + 5400, 1000) == 2
        assert hours_until(1000 + 5399, 1000) == 1

    def test_hours_until_past(self):
        assert hours_until(0, 7200) == -2


class TestCities:
    def test_five_cities(self):
        assert [city.name for city in CITIES] == ["Calgary", "Edmonton", "Vancouver", "Toronto", "Montreal"]

    def test_lookup_is_case_insensitive(self):
        assert get_city("toronto").state == "Ontario"

    def test_unknown_city(self):
        with pytest.raises(KeyError):
            get_city("Atlantis")

    def test_label(self):
        assert get_city("Montreal").label == "Montreal, Quebec"
