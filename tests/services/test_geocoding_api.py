"""
Tests for the geocoding API client.
"""

import httpx
import pytest

from city_weather.exceptions import GeocodeNotFound, GeocodeProviderError
from city_weather.models.location import Location
from city_weather.services.geocoding_api import GeocodingAPIClient

GEOCODING_URL = "http://geo.test/geo/1.0/direct"


def make_client(http_client, **kwargs):
    return GeocodingAPIClient(
        http_client, base_url=GEOCODING_URL, api_token="secret", **kwargs
    )


class TestGeocodingAPIClient:
    """Test cases for GeocodingAPIClient."""

    async def test_resolve_projects_candidates(self, make_http_client, berlin_candidate):
        """Test that candidates become locations without weather fields."""
        http_client = make_http_client(
            lambda request: httpx.Response(200, json=[berlin_candidate])
        )

        locations = await make_client(http_client).resolve("Berlin")

        assert locations == [
            Location(name="Berlin", lat=52.52, lon=13.40, country="DE", state="")
        ]
        assert not locations[0].is_enriched

    async def test_resolve_sends_query_limit_and_token(self, make_http_client, berlin_candidate):
        """Test the outbound query string of the geocoding call."""
        http_client = make_http_client(
            lambda request: httpx.Response(200, json=[berlin_candidate])
        )

        await make_client(http_client, limit=10).resolve("Berlin")

        assert len(http_client.sent) == 1
        request = http_client.sent[0]
        assert request.method == "GET"
        assert request.url.path == "/geo/1.0/direct"
        assert request.url.params["q"] == "Berlin"
        assert request.url.params["limit"] == "10"
        assert request.url.params["appid"] == "secret"

    async def test_resolve_keeps_provider_order(self, make_http_client):
        """Test that candidates come back in the order the provider sent them."""
        payload = [
            {"name": "Springfield", "lat": 39.8, "lon": -89.6, "country": "US", "state": "Illinois"},
            {"name": "Springfield", "lat": 37.2, "lon": -93.3, "country": "US", "state": "Missouri"},
            {"name": "Springfield", "lat": 42.1, "lon": -72.6, "country": "US"},
        ]
        http_client = make_http_client(lambda request: httpx.Response(200, json=payload))

        locations = await make_client(http_client).resolve("Springfield")

        assert [location.state for location in locations] == ["Illinois", "Missouri", None]

    async def test_nothing_to_geocode(self, make_http_client):
        """Test that the provider's 'Nothing to geocode' answer is a client error.

        The provider sends this message with HTTP 400, which must not be
        mistaken for a provider failure.
        """
        http_client = make_http_client(
            lambda request: httpx.Response(
                400, json={"cod": "400", "message": "Nothing to geocode"}
            )
        )

        with pytest.raises(GeocodeNotFound) as exc_info:
            await make_client(http_client).resolve("Berlin")

        assert exc_info.value.message == "Invalid city name (Berlin)"
        assert exc_info.value.status_code == 400

    async def test_no_candidates(self, make_http_client):
        """Test that an empty candidate list is reported as not found."""
        http_client = make_http_client(lambda request: httpx.Response(200, json=[]))

        with pytest.raises(GeocodeNotFound) as exc_info:
            await make_client(http_client).resolve("Atlantis")

        assert exc_info.value.message == "Can not find the city name of (Atlantis)"

    async def test_network_error(self, make_http_client):
        """Test that transport failures become provider errors."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        http_client = make_http_client(handler)

        with pytest.raises(GeocodeProviderError) as exc_info:
            await make_client(http_client).resolve("Berlin")

        assert exc_info.value.status_code == 500
        assert "connection refused" in exc_info.value.message
        assert exc_info.value.message.startswith("Failed to fetch data => ")

    async def test_error_status(self, make_http_client):
        """Test that an error status from the provider is a provider error."""
        http_client = make_http_client(
            lambda request: httpx.Response(401, json={"cod": 401, "message": "Invalid API key"})
        )

        with pytest.raises(GeocodeProviderError) as exc_info:
            await make_client(http_client).resolve("Berlin")

        assert "401" in exc_info.value.detail
        assert "Invalid API key" in exc_info.value.detail

    async def test_invalid_json(self, make_http_client):
        """Test that an unparsable body is a provider error."""
        http_client = make_http_client(
            lambda request: httpx.Response(200, content=b"<html>oops</html>")
        )

        with pytest.raises(GeocodeProviderError):
            await make_client(http_client).resolve("Berlin")

    async def test_malformed_candidate(self, make_http_client):
        """Test that a candidate without coordinates is a provider error."""
        http_client = make_http_client(
            lambda request: httpx.Response(200, json=[{"name": "Berlin"}])
        )

        with pytest.raises(GeocodeProviderError):
            await make_client(http_client).resolve("Berlin")

    async def test_unexpected_object_payload(self, make_http_client):
        """Test that a successful status with a non-list body is rejected."""
        http_client = make_http_client(
            lambda request: httpx.Response(200, json={"unexpected": True})
        )

        with pytest.raises(GeocodeProviderError):
            await make_client(http_client).resolve("Berlin")

    async def test_retries_transport_errors_when_enabled(self, make_http_client, berlin_candidate):
        """Test that configured retries re-issue the request after a timeout."""
        attempts = []

        def handler(request):
            attempts.append(request)
            if len(attempts) == 1:
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(200, json=[berlin_candidate])

        http_client = make_http_client(handler)

        locations = await make_client(
            http_client, max_attempts=2, retry_wait_max=0
        ).resolve("Berlin")

        assert len(attempts) == 2
        assert locations[0].name == "Berlin"
