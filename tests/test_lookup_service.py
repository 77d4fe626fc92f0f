from __future__ import annotations

from typing import List

import pytest
import requests

from weather_lookup.entities import Coordinate, LocationQuery, WeatherSummary
from weather_lookup.result import OperationResult
from weather_lookup.services.lookup import WeatherLookupService

PARIS = WeatherSummary(city="Paris", country="FR", temperature_c=18.5, description="clear sky")


class _GeocoderStub:
    def __init__(self, result: OperationResult[Coordinate]) -> None:
        self.result = result
        self.queries: List[LocationQuery] = []

    def resolve_query(self, query: LocationQuery) -> OperationResult[Coordinate]:
        self.queries.append(query)
        return self.result


class _WeatherStub:
    def __init__(self, result: OperationResult[WeatherSummary]) -> None:
        self.result = result
        self.calls: List[Coordinate] = []

    def fetch_coordinate(self, coordinate: Coordinate) -> OperationResult[WeatherSummary]:
        self.calls.append(coordinate)
        return self.result


def test_lookup_feeds_coordinate_to_weather_provider() -> None:
    geocoder = _GeocoderStub(OperationResult.success(Coordinate(latitude=51.5, longitude=-0.12)))
    weather = _WeatherStub(OperationResult.success(PARIS))
    service = WeatherLookupService(geocoder=geocoder, weather_provider=weather)

    result = service.lookup_location("London", "", "GB")

    assert result.unwrap() == PARIS
    assert geocoder.queries == [LocationQuery(city="London", state="", country="GB")]
    assert weather.calls == [Coordinate(latitude=51.5, longitude=-0.12)]


def test_lookup_stops_when_geocoding_fails() -> None:
    geocoder = _GeocoderStub(OperationResult.failure("Location not found"))
    weather = _WeatherStub(OperationResult.success(PARIS))
    service = WeatherLookupService(geocoder=geocoder, weather_provider=weather)

    result = service.lookup_location("Atlantis", "XX", "ZZ")

    assert not result.ok
    assert result.error == "Location not found"
    assert weather.calls == []


def test_lookup_passes_weather_failure_through() -> None:
    geocoder = _GeocoderStub(OperationResult.success(Coordinate(latitude=1.0, longitude=2.0)))
    weather = _WeatherStub(OperationResult.failure("HTTP error! status: 500"))
    service = WeatherLookupService(geocoder=geocoder, weather_provider=weather)

    result = service.lookup(LocationQuery(city="Paris", state="IDF", country="FR"))

    assert not result.ok
    assert result.error == "HTTP error! status: 500"


def test_http_failure_during_geocoding_skips_weather_request(requests_mock, config) -> None:
    requests_mock.get("https://geo.test/direct", status_code=500, text="boom")
    requests_mock.get("https://weather.test/data", json={})
    with requests.Session() as session:
        result = WeatherLookupService.from_config(config, session).lookup_location("London", "ENG", "GB")

    assert result.error == "HTTP error! status: 500"
    assert requests_mock.call_count == 1


def test_end_to_end_with_empty_state(requests_mock, config, paris_payload) -> None:
    requests_mock.get("https://geo.test/direct", json=[{"lat": 51.5, "lon": -0.12}])
    requests_mock.get("https://weather.test/data", json=paris_payload)
    with requests.Session() as session:
        result = WeatherLookupService.from_config(config, session).lookup_location("London", "", "GB")

    assert "\n".join(result.unwrap().lines()) == "City: Paris, FR\nTemperature: 18.5°C\nWeather: clear sky"
    assert requests_mock.call_count == 2


def test_summary_lines_use_provider_city() -> None:
    assert PARIS.lines() == ["City: Paris, FR", "Temperature: 18.5°C", "Weather: clear sky"]


def test_summary_lines_print_whole_temperatures_without_fraction() -> None:
    summary = WeatherSummary(city="Oslo", country="NO", temperature_c=-3.0, description="snow")

    assert summary.lines()[1] == "Temperature: -3°C"


def test_unwrap_on_failure_raises() -> None:
    result: OperationResult[int] = OperationResult.failure("nope")

    with pytest.raises(ValueError, match="nope"):
        result.unwrap()
