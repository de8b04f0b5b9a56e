from typing import Any, List

import httpx
from pydantic import ValidationError as PydanticValidationError

from city_weather.definitions.openweather import NOTHING_TO_GEOCODE
from city_weather.exceptions import GeocodeNotFound, GeocodeProviderError
from city_weather.models.location import Location
from city_weather.schemas.openweather import GeocodingCandidate
from city_weather.utils.logger import setup_logger
from city_weather.utils.resilience import provider_retry

logger = setup_logger(__name__)


class GeocodingAPIClient:
    """
    Client for the OpenWeather direct geocoding endpoint.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        api_token: str,
        limit: int = 10,
        max_attempts: int = 1,
        retry_wait_max: float = 4.0,
    ):
        self.http_client = http_client
        self.base_url = base_url
        self.api_token = api_token
        self.limit = limit
        self.max_attempts = max_attempts
        self.retry_wait_max = retry_wait_max

    async def resolve(self, city_name: str) -> List[Location]:
        logger.info(
            "Resolving city candidates",
            extra={"city": city_name, "event": "api_call", "api": "geocoding"},
        )
        try:
            async for attempt in provider_retry(self.max_attempts, self.retry_wait_max):
                with attempt:
                    response = await self.http_client.get(
                        self.base_url,
                        params={"q": city_name, "limit": self.limit, "appid": self.api_token},
                    )
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(
                "Failed to reach geocoding API",
                extra={
                    "city": city_name,
                    "event": "api_error",
                    "api": "geocoding",
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise GeocodeProviderError(str(e)) from e

        # The provider reports an unusable query with a 400 and this message,
        # so it has to be checked before the status code.
        if isinstance(payload, dict) and payload.get("message") == NOTHING_TO_GEOCODE:
            raise GeocodeNotFound(f"Invalid city name ({city_name})")

        if response.is_error:
            detail = self._error_detail(payload)
            logger.error(
                "Geocoding API returned an error status",
                extra={
                    "city": city_name,
                    "event": "api_error",
                    "api": "geocoding",
                    "status_code": response.status_code,
                    "error": detail,
                },
            )
            raise GeocodeProviderError(
                f"geocoding API responded with {response.status_code}: {detail}"
            )

        if not isinstance(payload, list):
            raise GeocodeProviderError("geocoding API returned an unexpected payload")

        if not payload:
            logger.info(
                "No candidates found",
                extra={"city": city_name, "event": "geocode_not_found"},
            )
            raise GeocodeNotFound(f"Can not find the city name of ({city_name})")

        try:
            candidates = [GeocodingCandidate.model_validate(item) for item in payload]
        except PydanticValidationError as e:
            raise GeocodeProviderError(f"malformed geocoding candidate: {e}") from e

        logger.info(
            "Resolved city candidates",
            extra={"city": city_name, "event": "geocode_resolved", "candidates": len(candidates)},
        )
        return [Location.from_candidate(candidate) for candidate in candidates]

    @staticmethod
    def _error_detail(payload: Any) -> str:
        if isinstance(payload, dict) and "message" in payload:
            return str(payload["message"])
        return str(payload)
