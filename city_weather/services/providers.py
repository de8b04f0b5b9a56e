"""
Capability interfaces for the external providers.

The resolver and enricher only depend on these protocols, so tests can
hand in deterministic fakes instead of HTTP clients.
"""

from typing import List, Protocol

from city_weather.models.location import Location
from city_weather.schemas.openweather import CurrentWeatherResponse


class GeocodingProvider(Protocol):
    async def resolve(self, city_name: str) -> List[Location]:
        """
        Resolve a city name to candidate locations without weather data.

        Raises GeocodeNotFound when nothing matches and GeocodeProviderError
        when the provider cannot be reached or answers garbage.
        """
        ...


class WeatherProvider(Protocol):
    async def fetch_conditions(self, lat: float, lon: float) -> CurrentWeatherResponse:
        """
        Fetch current conditions at a coordinate.

        Raises WeatherProviderError on any transport, status or payload failure.
        """
        ...
