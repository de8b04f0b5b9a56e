"""
Common test fixtures and configuration.
"""

from typing import Callable, List

import httpx
import pytest

from city_weather.models.location import Location


@pytest.fixture
def berlin_candidate():
    """Raw geocoding candidate for Berlin."""
    return {
        "name": "Berlin",
        "local_names": {"de": "Berlin", "en": "Berlin"},
        "lat": 52.52,
        "lon": 13.40,
        "country": "DE",
        "state": "",
    }


@pytest.fixture
def clear_weather_payload():
    """Current weather payload with a single 'Clear' condition."""
    return {
        "coord": {"lon": 13.4, "lat": 52.52},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
        "main": {"temp": 297.5, "temp_min": 295.0, "temp_max": 300.0},
        "name": "Berlin",
        "cod": 200,
    }


@pytest.fixture
def berlin_location():
    return Location(name="Berlin", lat=52.52, lon=13.40, country="DE", state="")


@pytest.fixture
def make_http_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """
    Build AsyncClients backed by httpx.MockTransport.

    Every request that reaches the transport is appended to the returned
    client's ``sent`` list so tests can count outbound calls.
    """

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        sent: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        client.sent = sent
        return client

    return factory
