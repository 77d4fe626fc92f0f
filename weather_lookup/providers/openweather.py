"""OpenWeather current weather provider."""
from __future__ import annotations

from typing import Any

from ..entities import Coordinate, WeatherSummary
from ..result import OperationResult
from .base import OpenWeatherClient, ParseError, coerce_float, require_field, require_text


class OpenWeatherProvider(OpenWeatherClient):
    """Integration with the OpenWeather current weather endpoint."""

    def fetch(self, latitude: float, longitude: float) -> OperationResult[WeatherSummary]:
        """Return current conditions for the coordinates, or the reason there are none."""
        return self._run(self._fetch, latitude, longitude)

    def fetch_coordinate(self, coordinate: Coordinate) -> OperationResult[WeatherSummary]:
        return self.fetch(coordinate.latitude, coordinate.longitude)

    def _fetch(self, latitude: float, longitude: float) -> WeatherSummary:
        params = {"lat": latitude, "lon": longitude, "units": self.config.units}
        response = self._get(self.config.weather_url, params)
        return parse_weather_data(self._json(response))


def parse_weather_data(data: Any) -> WeatherSummary:
    """Normalize an OpenWeather ``/weather`` payload.

    Raises :class:`ParseError` when any of ``name``, ``sys.country``,
    ``main.temp`` or ``weather[0].description`` is absent.
    """
    if not isinstance(data, dict):
        raise ParseError("weather response is not an object")
    return WeatherSummary(
        city=require_text(data, "name"),
        country=require_text(data, "sys.country"),
        temperature_c=coerce_float(require_field(data, "main.temp"), field_name="main.temp"),
        description=require_text(data, "weather.0.description"),
    )


__all__ = ["OpenWeatherProvider", "parse_weather_data"]
