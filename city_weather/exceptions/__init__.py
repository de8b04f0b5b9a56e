"""City weather service exceptions."""

from .common import (
    CityWeatherException,
    ValidationError,
    GeocodeNotFound,
    ExternalAPIException,
    GeocodeProviderError,
    WeatherProviderError,
    EnrichmentFailed,
)

__all__ = [
    "CityWeatherException",
    "ValidationError",
    "GeocodeNotFound",
    "ExternalAPIException",
    "GeocodeProviderError",
    "WeatherProviderError",
    "EnrichmentFailed",
]
