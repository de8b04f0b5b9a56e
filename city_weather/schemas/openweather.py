"""
This module defines schemas for payloads returned by the OpenWeather APIs.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class GeocodingCandidate(BaseModel):
    """One match returned by the direct geocoding endpoint."""

    name: str
    lat: float
    lon: float
    country: Optional[str] = None
    state: Optional[str] = None


class MainReadings(BaseModel):
    temp_max: float = Field(..., description="Maximum temperature in Kelvin")
    temp_min: float = Field(..., description="Minimum temperature in Kelvin")


class ConditionLabel(BaseModel):
    main: str = Field(..., description="Condition group, e.g. 'Clear' or 'Rain'")


class CurrentWeatherResponse(BaseModel):
    """Subset of the current weather payload used for enrichment."""

    main: MainReadings
    weather: List[ConditionLabel] = Field(..., description="Condition labels, may be empty")

    def summary(self) -> str:
        return ",".join(label.main for label in self.weather)
