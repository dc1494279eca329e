"""Cities offered by the dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class City:
    name: str
    lat: float
    lon: float
    country: str
    state: Optional[str] = None

    @property
    def label(self) -> str:
        return f"{self.name}, {self.state}" if self.state else f"{self.name}, {self.country}"


CITIES: List[City] = [
    City("Calgary", 51.0447, -114.0719, "CA", "Alberta"),
    City("Edmonton", 53.5461, -113.4938, "CA", "Alberta"),
    City("Vancouver", 49.2827, -123.1207, "CA", "British Columbia"),
    City("Toronto", 43.6532, -79.3832, "CA", "Ontario"),
    City("Montreal", 45.5017, -73.5673, "CA", "Quebec"),
]


def get_city(name: str) -> City:
    for city in CITIES:
        if city.name.lower() == name.lower():
            return city
    raise KeyError(f"Unknown city {name}")
