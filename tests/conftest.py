from __future__ import annotations

import pytest

from requests_mock import Mocker

from weather_lookup.config import OpenWeatherConfig

GEO_URL = "https://geo.test/direct"
WEATHER_URL = "https://weather.test/data"


@pytest.fixture
def requests_mock():
    with Mocker() as mock:
        yield mock


@pytest.fixture
def config() -> OpenWeatherConfig:
    return OpenWeatherConfig(api_key="test-key", geocoding_url=GEO_URL, weather_url=WEATHER_URL)


@pytest.fixture
def paris_payload() -> dict:
    return {
        "name": "Paris",
        "sys": {"country": "FR"},
        "main": {"temp": 18.5},
        "weather": [{"description": "clear sky"}],
    }
