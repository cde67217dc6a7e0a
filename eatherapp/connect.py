"""HTTP access to the Open-Meteo geocoding and forecast services."""

from __future__ import annotations

import json
import urllib.error
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

GEOCODING_BASE = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_BASE = "https://api.open-meteo.com/v1/forecast?"
USER_AGENT = "libcurl-agent/1.0"

Fetcher = Callable[[str], bytes]


class ConnectionError_(Exception):
    """Raised when a request fails or its answer cannot be used."""


@dataclass(frozen=True)
class GeoLocation:
    """Latitude and longitude of a place."""

    lat: float
    lon: float


def geocoding_url(name: str) -> str:
    """Return the geocoding search URL for a place name."""
    return (
        f"{GEOCODING_BASE}?name={urllib.parse.quote(name, safe='')}"
        "&count=1&language=en&format=json"
    )


def build_forecast_url(params: Iterable[str]) -> str:
    """Join ``key=value`` parameters onto the forecast endpoint."""
    return FORECAST_BASE + "&".join(params)


def _urllib_fetch(url: str) -> bytes:
    request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
    try:
        with urllib.request.urlopen(request) as response:
            return response.read()
    except (urllib.error.URLError, OSError) as exc:
        raise ConnectionError_(f"request to {url} failed: {exc}") from exc


class Connection:
    """Client for the weather service that keeps the last response body."""

    def __init__(self, debug: bool = False, fetch: Optional[Fetcher] = None):
        self.debug = debug
        self.url = ""
        self.data = b""
        self._fetch = fetch or _urllib_fetch

    def reset(self) -> None:
        """Forget the last response body."""
        self.data = b""

    def geolocation(self, name: str) -> GeoLocation:
        """Look up the coordinates of the first place matching ``name``."""
        self.data = self._fetch(geocoding_url(name))
        try:
            first = json.loads(self.data)["results"][0]
            return GeoLocation(float(first["latitude"]), float(first["longitude"]))
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise ConnectionError_(f"no location found for {name!r}") from exc

    def request(self, params: Iterable[str]) -> bytes:
        """Fetch a forecast for the given parameters and return the raw body."""
        self.url = build_forecast_url(params)
        print(self.url)
        self.data = self._fetch(self.url)
        if self.debug:
            print(f"Size: {len(self.data)}")
            print(f"Data: {self.data.decode('utf-8', errors='replace')}")
        return self.data

    def build_param(self, name: str, value: object) -> str:
        """Format a single ``name=value`` query parameter."""
        return f"{name}={value}"