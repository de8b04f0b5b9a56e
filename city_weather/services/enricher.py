from city_weather.exceptions import EnrichmentFailed, ExternalAPIException
from city_weather.models.location import Location
from city_weather.services.providers import WeatherProvider
from city_weather.utils.logger import setup_logger
from city_weather.utils.units import kelvin_to_celsius

logger = setup_logger(__name__)


class WeatherEnricher:
    """
    Attaches current conditions to a geocoded location.
    """

    def __init__(self, weather_provider: WeatherProvider):
        self.weather_provider = weather_provider

    async def enrich(self, location: Location) -> Location:
        """
        Return a copy of ``location`` with weather, temp_min and temp_max set.

        The input record is left untouched, so a failure never leaves a
        half-enriched location behind.
        """
        try:
            conditions = await self.weather_provider.fetch_conditions(
                location.lat, location.lon
            )
        except ExternalAPIException as e:
            logger.error(
                "Failed to fetch weather for location",
                extra={
                    "city": location.name,
                    "event": "enrichment_failed",
                    "lat": location.lat,
                    "lon": location.lon,
                    "error": e.detail,
                    "error_type": type(e).__name__,
                },
            )
            raise EnrichmentFailed(location.name) from e

        return location.model_copy(
            update={
                "weather": conditions.summary(),
                "temp_min": kelvin_to_celsius(conditions.main.temp_min),
                "temp_max": kelvin_to_celsius(conditions.main.temp_max),
            }
        )
