from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class LocationQuery:
    """Free-text location as typed by the user."""

    city: str
    state: str
    country: str

    def as_query(self) -> str:
        return f"{self.city},{self.state},{self.country}"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherSummary:
    """Current conditions as reported by the weather provider.

    ``city`` is the provider's own name for the place and may differ from the
    city that was geocoded. Temperature is always Celsius.
    """

    city: str
    country: str
    temperature_c: float
    description: str

    def lines(self) -> List[str]:
        return [
            f"City: {self.city}, {self.country}",
            f"Temperature: {_format_number(self.temperature_c)}°C",
            f"Weather: {self.description}",
        ]


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


__all__ = ["LocationQuery", "Coordinate", "WeatherSummary"]
