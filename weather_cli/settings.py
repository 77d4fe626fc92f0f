"""Django settings for the weather lookup command line tool."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


def env_timeout(name: str, default: str) -> float | None:
    raw = env(name, default)
    try:
        value = float(raw)
    except ValueError as exc:
        raise ImproperlyConfigured(f"Environment variable {name} must be a number of seconds") from exc
    # 0 means wait forever
    return value if value > 0 else None


INSTALLED_APPS = [
    "weather_cli",
]

USE_TZ = True
TIME_ZONE = "UTC"

OPENWEATHER_API_KEY = env("OPENWEATHER_API_KEY", "")
OPENWEATHER_GEOCODING_URL = env(
    "OPENWEATHER_GEOCODING_URL", "https://api.openweathermap.org/geo/1.0/direct"
)
OPENWEATHER_WEATHER_URL = env(
    "OPENWEATHER_WEATHER_URL", "https://api.openweathermap.org/data/2.5/weather"
)
OPENWEATHER_TIMEOUT = env_timeout("OPENWEATHER_TIMEOUT", "10")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "plain",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": env("WEATHER_LOG_LEVEL", "ERROR").upper(),
    },
}
