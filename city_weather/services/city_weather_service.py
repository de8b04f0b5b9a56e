"""
This module resolves a city name into weather-enriched locations.
"""

from typing import List

from city_weather.exceptions import EnrichmentFailed
from city_weather.models.location import Location
from city_weather.schemas.common import CityNameQuery
from city_weather.services.enricher import WeatherEnricher
from city_weather.services.providers import GeocodingProvider
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)


class CityWeatherService:
    """
    Looks up every location matching a city name and attaches current weather.
    """

    def __init__(self, geocoder: GeocodingProvider, enricher: WeatherEnricher):
        self.geocoder = geocoder
        self.enricher = enricher

    async def lookup(self, city_name: str) -> List[Location]:
        """
        Validate the name, resolve candidates and enrich them one by one.

        Candidates are enriched sequentially in the order the provider
        returned them. The first EnrichmentFailed aborts the lookup, so the
        caller either gets every candidate enriched or an error naming the
        city that failed.

        Raises:
            ValidationError: the name contains anything but ASCII letters
            GeocodeNotFound: the provider has no match for the name
            GeocodeProviderError: the geocoding call itself failed
            EnrichmentFailed: current conditions for a candidate failed
        """
        query = CityNameQuery(city_name=city_name)

        candidates = await self.geocoder.resolve(query.city_name)

        enriched = []
        for index, candidate in enumerate(candidates):
            try:
                enriched.append(await self.enricher.enrich(candidate))
            except EnrichmentFailed as e:
                logger.warning(
                    "Aborting lookup after enrichment failure",
                    extra={
                        "city": query.city_name,
                        "event": "lookup_aborted",
                        "failed_location": e.city_name,
                        "candidate_index": index,
                        "candidates": len(candidates),
                    },
                )
                raise

        return enriched
