"""
FastAPI dependency injection providers.

The API credential and provider URLs are read from settings here and passed
explicitly into the clients, so routes and services never touch global
configuration and tests can override any level of the graph.
"""

import httpx
from fastapi import Depends, Request

from city_weather.config import Settings, get_settings
from city_weather.services.city_weather_service import CityWeatherService
from city_weather.services.enricher import WeatherEnricher
from city_weather.services.geocoding_api import GeocodingAPIClient
from city_weather.services.providers import GeocodingProvider, WeatherProvider
from city_weather.services.weather_api import WeatherAPIClient


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the pooled HTTP client used for every outbound provider call.
    """
    return httpx.AsyncClient(timeout=settings.external_api_timeout)


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Provide the application-wide HTTP client created during startup.
    """
    return request.app.state.http_client


async def get_geocoding_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> GeocodingProvider:
    """
    Provide the geocoding provider.

    Args:
        http_client: Shared HTTP client from dependency
        settings: Application settings

    Returns:
        GeocodingProvider: Client for the geocoding endpoint
    """
    return GeocodingAPIClient(
        http_client,
        base_url=settings.geocoding_api_url,
        api_token=settings.api_token,
        limit=settings.geocoding_result_limit,
        max_attempts=settings.retry_max_attempts,
        retry_wait_max=settings.retry_wait_max,
    )


async def get_weather_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> WeatherProvider:
    """
    Provide the current weather provider.

    Args:
        http_client: Shared HTTP client from dependency
        settings: Application settings

    Returns:
        WeatherProvider: Client for the current weather endpoint
    """
    return WeatherAPIClient(
        http_client,
        base_url=settings.weather_api_url,
        api_token=settings.api_token,
        max_attempts=settings.retry_max_attempts,
        retry_wait_max=settings.retry_wait_max,
    )


async def get_city_weather_service(
    geocoder: GeocodingProvider = Depends(get_geocoding_client),
    weather_provider: WeatherProvider = Depends(get_weather_client),
) -> CityWeatherService:
    """
    Provide the city weather service with all dependencies.
    """
    return CityWeatherService(
        geocoder=geocoder,
        enricher=WeatherEnricher(weather_provider),
    )
