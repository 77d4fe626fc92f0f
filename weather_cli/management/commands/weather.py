"""Management command printing the current weather for a city."""
from __future__ import annotations

from typing import Any

import requests
from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from weather_cli.services import get_lookup_service
from weather_lookup.entities import LocationQuery

USAGE_ERROR = "Please provide city, state, and country code as arguments."


class Command(BaseCommand):
    help = "Print the current weather for <city> <state> <country>"
    requires_system_checks: list[str] = []

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("city", nargs="?", default="", help="City name")
        parser.add_argument("state", nargs="?", default="", help="State code")
        parser.add_argument("country", nargs="?", default="", help="Country code")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        query = LocationQuery(
            city=options["city"] or "",
            state=options["state"] or "",
            country=options["country"] or "",
        )
        if not (query.city and query.state and query.country):
            raise CommandError(USAGE_ERROR)
        if not settings.OPENWEATHER_API_KEY:
            raise CommandError("OPENWEATHER_API_KEY is not configured")

        with requests.Session() as session:
            result = get_lookup_service(session).lookup(query)
        # A failed lookup is reported but does not change the exit status.
        if not result.ok:
            self.stderr.write(result.error or "")
            return

        for line in result.unwrap().lines():
            self.stdout.write(line)
