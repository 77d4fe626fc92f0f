from __future__ import annotations

import requests
from django.conf import settings

from weather_lookup.config import OpenWeatherConfig
from weather_lookup.services.lookup import WeatherLookupService


def get_openweather_config() -> OpenWeatherConfig:
    return OpenWeatherConfig(
        api_key=settings.OPENWEATHER_API_KEY,
        geocoding_url=settings.OPENWEATHER_GEOCODING_URL,
        weather_url=settings.OPENWEATHER_WEATHER_URL,
        timeout=settings.OPENWEATHER_TIMEOUT,
    )


def get_lookup_service(session: requests.Session) -> WeatherLookupService:
    return WeatherLookupService.from_config(get_openweather_config(), session)
