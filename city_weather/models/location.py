from typing import Optional

from pydantic import BaseModel, Field

from city_weather.schemas.openweather import GeocodingCandidate


class Location(BaseModel):
    """
    A geocoded location, optionally enriched with current conditions.

    The weather fields stay unset until the enricher returns a fully
    populated copy; unset fields are left out of API responses.
    """

    name: str = Field(..., description="Display name of the location")
    lat: float = Field(..., description="Latitude in decimal degrees")
    lon: float = Field(..., description="Longitude in decimal degrees")
    country: Optional[str] = Field(None, description="Country code")
    state: Optional[str] = Field(None, description="State or region, may be empty")
    weather: Optional[str] = Field(None, description="Comma-joined weather conditions")
    temp_min: Optional[float] = Field(None, description="Minimum temperature in Celsius")
    temp_max: Optional[float] = Field(None, description="Maximum temperature in Celsius")

    @classmethod
    def from_candidate(cls, candidate: GeocodingCandidate) -> "Location":
        return cls(
            name=candidate.name,
            lat=candidate.lat,
            lon=candidate.lon,
            country=candidate.country,
            state=candidate.state,
        )

    @property
    def is_enriched(self) -> bool:
        return None not in (self.weather, self.temp_min, self.temp_max)
