from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, Optional, TypeVar

import requests
from requests import Response

from ..config import OpenWeatherConfig
from ..result import OperationResult

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ProviderError(RuntimeError):
    """Base provider error. The message is what the user gets to see."""


class TransportError(ProviderError):
    """Raised when a request fails or the provider answers with a non-2xx status."""


class NotFoundError(ProviderError):
    """Raised when the provider has no match for the request."""


class ParseError(ProviderError):
    """Raised when a payload lacks the fields we rely on."""

    def __init__(self, cause: str) -> None:
        super().__init__(f"Error parsing data: {cause}")


class OpenWeatherClient:
    """Shared plumbing for the OpenWeather endpoints.

    Subclasses raise :class:`ProviderError` internally and expose public
    methods that go through :meth:`_run`, so callers only ever receive an
    :class:`OperationResult`.
    """

    def __init__(
        self,
        config: OpenWeatherConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()
        self._testing_mode = os.environ.get("TESTING_MODE", "0") == "1"
        self._log = logging.getLogger(self.__class__.__name__)

    def _run(self, operation: Callable[..., T], *args: Any) -> OperationResult[T]:
        try:
            return OperationResult.success(operation(*args))
        except ProviderError as exc:
            self._log.warning("%s failed: %s", operation.__name__, exc)
            return OperationResult.failure(str(exc))
        except Exception as exc:  # noqa: BLE001 - nothing may escape a lookup stage
            self._log.warning("%s raised unexpectedly", operation.__name__, exc_info=exc)
            return OperationResult.failure(f"An error occurred: {exc}")

    def _get(self, url: str, params: Dict[str, Any]) -> Response:
        query = dict(params, appid=self.config.api_key)
        self._log.debug("GET %s %s", url, params)
        try:
            response = self.session.get(url, params=query, timeout=self.config.timeout)
        except requests.Timeout as exc:
            raise TransportError(f"An error occurred: request timed out ({exc})") from exc
        except requests.RequestException as exc:
            raise TransportError(f"An error occurred: {exc}") from exc
        self._log_response(url, response)
        return self._handle_response(response)

    def _handle_response(self, response: Response) -> Response:
        if not 200 <= response.status_code < 300:
            self._log.warning("Provider returned %s: %s", response.status_code, response.text[:200])
            raise TransportError(f"HTTP error! status: {response.status_code}")
        return response

    def _json(self, response: Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ParseError(f"invalid json ({exc})") from exc

    def _log_response(self, url: str, response: Response) -> None:
        if not self._testing_mode:
            return
        logger.info(
            "OpenWeather response",
            extra={"url": url, "status": response.status_code, "body": response.text[:500]},
        )


def require_field(payload: Any, path: str) -> Any:
    """Walk a dotted path such as ``"weather.0.description"`` through a payload."""
    value = payload
    for part in path.split("."):
        if isinstance(value, list) and part.isdigit():
            index = int(part)
            value = value[index] if index < len(value) else None
        elif isinstance(value, dict):
            value = value.get(part)
        else:
            value = None
        if value is None:
            raise ParseError(f"missing field '{path}'")
    return value


def require_text(payload: Any, path: str) -> str:
    value = require_field(payload, path)
    if not isinstance(value, str):
        raise ParseError(f"expected text for '{path}'")
    return value


def coerce_float(value: Any, *, field_name: str) -> float:
    if value is None:
        raise ParseError(f"missing field '{field_name}'")
    if isinstance(value, bool):
        raise ParseError(f"invalid numeric value for '{field_name}'")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"invalid numeric value for '{field_name}'") from exc


__all__ = [
    "OpenWeatherClient",
    "ProviderError",
    "TransportError",
    "NotFoundError",
    "ParseError",
    "coerce_float",
    "require_field",
    "require_text",
]
