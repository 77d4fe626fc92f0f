from __future__ import annotations

import os

import django


os.environ.setdefault("DJANGO_SETTINGS_MODULE", "weather_cli.settings")
os.environ.setdefault("OPENWEATHER_API_KEY", "test-key")
os.environ.setdefault("OPENWEATHER_GEOCODING_URL", "https://geo.test/direct")
os.environ.setdefault("OPENWEATHER_WEATHER_URL", "https://weather.test/data")
os.environ.setdefault("TESTING_MODE", "1")

django.setup()
