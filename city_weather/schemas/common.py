"""
This module defines request and response schemas for the HTTP API.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

from city_weather.definitions.openweather import CITY_NAME_PATTERN
from city_weather.exceptions.common import ValidationError


class CityNameQuery(BaseModel):
    """
    City name taken from the request path.

    Only ASCII letters are accepted, since the value ends up in the query
    string of the geocoding request.
    """

    city_name: str

    @field_validator("city_name")
    @classmethod
    def validate_city_name(cls, v: str) -> str:
        if not CITY_NAME_PATTERN.fullmatch(v):
            raise ValidationError(
                "Invalid city name => city_name must only contain alphabetic characters"
            )
        return v


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="API version")
    timestamp: str = Field(..., description="Current timestamp")
    services: Dict[str, str] = Field(..., description="Status of dependent services")
    detail: Optional[str] = Field(None, description="Why the service is degraded")
