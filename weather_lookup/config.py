from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"
WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


@dataclass(frozen=True)
class OpenWeatherConfig:
    """Credential and endpoints shared by the geocoder and the weather provider."""

    api_key: str
    geocoding_url: str = GEOCODING_URL
    weather_url: str = WEATHER_URL
    timeout: Optional[float] = 10.0
    units: str = "metric"


__all__ = ["OpenWeatherConfig", "GEOCODING_URL", "WEATHER_URL"]
