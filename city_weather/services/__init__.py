"""
Services package initialization.
"""

from city_weather.services.city_weather_service import CityWeatherService
from city_weather.services.enricher import WeatherEnricher
from city_weather.services.geocoding_api import GeocodingAPIClient
from city_weather.services.providers import GeocodingProvider, WeatherProvider
from city_weather.services.weather_api import WeatherAPIClient

__all__ = [
    "CityWeatherService",
    "WeatherEnricher",
    "GeocodingAPIClient",
    "WeatherAPIClient",
    "GeocodingProvider",
    "WeatherProvider",
]
