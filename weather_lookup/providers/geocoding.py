from __future__ import annotations

from typing import Any

from ..entities import Coordinate, LocationQuery
from ..result import OperationResult
from .base import NotFoundError, OpenWeatherClient, ParseError, coerce_float


class OpenWeatherGeocoder(OpenWeatherClient):
    """Resolve "city,state,country" to the best matching coordinate."""

    def resolve(self, city: str, state: str, country: str) -> OperationResult[Coordinate]:
        return self.resolve_query(LocationQuery(city=city, state=state, country=country))

    def resolve_query(self, query: LocationQuery) -> OperationResult[Coordinate]:
        return self._run(self._resolve, query)

    # Helpers ------------------------------------------------------------
    def _resolve(self, query: LocationQuery) -> Coordinate:
        params = {"q": query.as_query(), "limit": 1}
        response = self._get(self.config.geocoding_url, params)
        candidates = self._json(response)
        if not isinstance(candidates, list):
            raise ParseError("geocoding response is not a list")
        if not candidates:
            raise NotFoundError("Location not found")
        return parse_candidate(candidates[0])


def parse_candidate(candidate: Any) -> Coordinate:
    if not isinstance(candidate, dict):
        raise ParseError("geocoding candidate is not an object")
    return Coordinate(
        latitude=coerce_float(candidate.get("lat"), field_name="lat"),
        longitude=coerce_float(candidate.get("lon"), field_name="lon"),
    )


__all__ = ["OpenWeatherGeocoder", "parse_candidate"]
