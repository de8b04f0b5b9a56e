class CityWeatherException(Exception):
    """Base exception for the city weather service."""

    status_code: int = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(CityWeatherException):
    """Raised when the requested city name is malformed."""

    status_code = 400


class GeocodeNotFound(CityWeatherException):
    """Raised when the geocoding provider has no match for a city name."""

    status_code = 400


class ExternalAPIException(CityWeatherException):
    """Raised when an external API call fails."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to fetch data => {detail}")


class GeocodeProviderError(ExternalAPIException):
    """Raised when talking to the geocoding provider fails."""


class WeatherProviderError(ExternalAPIException):
    """Raised when talking to the weather provider fails."""


class EnrichmentFailed(CityWeatherException):
    """Raised when current conditions could not be attached to a location."""

    status_code = 400

    def __init__(self, city_name: str):
        self.city_name = city_name
        super().__init__(f"Get the weather info of ({city_name}) failed")
