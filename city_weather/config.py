"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "City Weather API"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # OpenWeather credential, shared by both providers
    api_token: str = ""

    # External API settings
    geocoding_api_url: str = "http://api.openweathermap.org/geo/1.0/direct"
    weather_api_url: str = "https://api.openweathermap.org/data/2.5/weather"
    external_api_timeout: float = 5.0
    geocoding_result_limit: int = Field(default=10, ge=1, le=10)
    expose_provider_errors: bool = True

    # Retry settings (1 attempt means no retry)
    retry_max_attempts: int = Field(default=1, ge=1)
    retry_wait_max: float = 4.0

    # CORS settings
    cors_origins: List[str] = ["http://localhost:3000"]
    cors_path_prefix: str = "/city/"
    cors_allow_credentials: bool = False
    cors_allow_methods: List[str] = ["GET", "HEAD", "PUT", "POST", "DELETE", "PATCH"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
