"""
This module defines the HTTP routes of the city weather relay.
"""

from datetime import datetime, UTC
from typing import List

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from city_weather.config import Settings, get_settings
from city_weather.exceptions import CityWeatherException, ExternalAPIException
from city_weather.models.location import Location
from city_weather.schemas.common import ErrorResponse, HealthResponse
from city_weather.services.city_weather_service import CityWeatherService
from city_weather.utils.dependencies import get_city_weather_service
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

router = APIRouter()

GREETING = "Guten Tag! Mein Name ist Lixun."


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@router.get("/", response_class=PlainTextResponse)
async def greeting() -> str:
    return GREETING


@router.get(
    "/city/{city_name}",
    response_model=List[Location],
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_city_weather(
    request: Request,
    city_name: str,
    service: CityWeatherService = Depends(get_city_weather_service),
    settings: Settings = Depends(get_settings),
):
    """
    Get current weather for every location matching a city name.

    The name must consist of ASCII letters only. Each match returned by the
    geocoding provider is enriched with its current conditions, min and max
    temperature in Celsius.
    """
    try:
        return await service.lookup(city_name)

    except ExternalAPIException as e:
        logger.error(
            "Provider failure while looking up city",
            extra={
                "event": "api_error",
                "city": city_name,
                "error": e.detail,
                "error_type": type(e).__name__,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        message = e.message if settings.expose_provider_errors else "Failed to fetch data"
        return error_response(e.status_code, message)

    except CityWeatherException as e:
        logger.info(
            "City lookup rejected",
            extra={
                "event": "lookup_rejected",
                "city": city_name,
                "error": e.message,
                "error_type": type(e).__name__,
            },
        )
        return error_response(e.status_code, e.message)

    except Exception as e:
        logger.error(
            "Unexpected error looking up city",
            extra={
                "event": "api_error",
                "city": city_name,
                "error": str(e),
                "error_type": type(e).__name__,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        return error_response(500, "Internal server error")


@router.get("/health", response_model=HealthResponse, response_model_exclude_none=True)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Health check endpoint that returns service status.
    """
    token_status = "configured" if settings.api_token else "missing"

    return HealthResponse(
        status="healthy" if settings.api_token else "degraded",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
        services={
            "geocoding_api": settings.geocoding_api_url,
            "weather_api": settings.weather_api_url,
            "api_token": token_status,
        },
        detail=None if settings.api_token else "API_TOKEN is not set",
    )
