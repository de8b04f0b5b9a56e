import httpx

from city_weather.exceptions import WeatherProviderError
from city_weather.schemas.openweather import CurrentWeatherResponse
from city_weather.utils.logger import setup_logger
from city_weather.utils.resilience import provider_retry

logger = setup_logger(__name__)


class WeatherAPIClient:
    """
    Client for the OpenWeather current weather endpoint.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        api_token: str,
        max_attempts: int = 1,
        retry_wait_max: float = 4.0,
    ):
        self.http_client = http_client
        self.base_url = base_url
        self.api_token = api_token
        self.max_attempts = max_attempts
        self.retry_wait_max = retry_wait_max

    async def fetch_conditions(self, lat: float, lon: float) -> CurrentWeatherResponse:
        try:
            async for attempt in provider_retry(self.max_attempts, self.retry_wait_max):
                with attempt:
                    response = await self.http_client.get(
                        self.base_url,
                        params={"lat": lat, "lon": lon, "appid": self.api_token},
                    )
            response.raise_for_status()
            data = response.json()
            conditions = CurrentWeatherResponse.model_validate(data)
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers both bad JSON and pydantic validation errors
            raise WeatherProviderError(str(e)) from e

        logger.debug(
            "Fetched current conditions",
            extra={"event": "api_call", "api": "weather", "lat": lat, "lon": lon},
        )
        return conditions
