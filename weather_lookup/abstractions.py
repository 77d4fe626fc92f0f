"""Stage contracts for the lookup pipeline."""
from __future__ import annotations

from typing import Protocol

from .entities import Coordinate, LocationQuery, WeatherSummary
from .result import OperationResult


class Geocoder(Protocol):
    """Turns a location query into a single coordinate."""

    def resolve_query(self, query: LocationQuery) -> OperationResult[Coordinate]:
        ...


class WeatherFetcher(Protocol):
    """Returns current conditions for a coordinate."""

    def fetch_coordinate(self, coordinate: Coordinate) -> OperationResult[WeatherSummary]:
        ...


__all__ = ["Geocoder", "WeatherFetcher"]
