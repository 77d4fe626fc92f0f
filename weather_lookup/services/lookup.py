from __future__ import annotations

import logging
from typing import Optional

import requests

from ..abstractions import Geocoder, WeatherFetcher
from ..config import OpenWeatherConfig
from ..entities import LocationQuery, WeatherSummary
from ..providers.geocoding import OpenWeatherGeocoder
from ..providers.openweather import OpenWeatherProvider
from ..result import OperationResult


class WeatherLookupService:
    """Geocode a location, then fetch its current weather.

    The weather provider is only called when geocoding succeeded.
    """

    def __init__(
        self,
        *,
        geocoder: Geocoder,
        weather_provider: WeatherFetcher,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.geocoder = geocoder
        self.weather_provider = weather_provider
        self._log = logger or logging.getLogger(self.__class__.__name__)

    @classmethod
    def from_config(
        cls,
        config: OpenWeatherConfig,
        session: requests.Session,
    ) -> "WeatherLookupService":
        """Build both stages on one session. The caller owns and closes it."""
        return cls(
            geocoder=OpenWeatherGeocoder(config, session=session),
            weather_provider=OpenWeatherProvider(config, session=session),
        )

    # Public API ---------------------------------------------------------
    def lookup(self, query: LocationQuery) -> OperationResult[WeatherSummary]:
        located = self.geocoder.resolve_query(query)
        if not located.ok:
            self._log.info("Geocoding %r failed: %s", query.as_query(), located.error)
            return OperationResult.failure(located.error or "")

        coordinate = located.unwrap()
        self._log.debug("Resolved %r to %s", query.as_query(), coordinate)
        weather = self.weather_provider.fetch_coordinate(coordinate)
        if not weather.ok:
            self._log.info("Weather lookup for %s failed: %s", coordinate, weather.error)
        return weather

    def lookup_location(self, city: str, state: str, country: str) -> OperationResult[WeatherSummary]:
        return self.lookup(LocationQuery(city=city, state=state, country=country))


__all__ = ["WeatherLookupService"]
