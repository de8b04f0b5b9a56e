from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from city_weather.api import routes
from city_weather.config import get_settings
from city_weather.middleware.cors import PathScopedCORSMiddleware
from city_weather.middleware.request_tracker import RequestTrackerMiddleware
from city_weather.utils.dependencies import create_http_client
from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting City Weather API...")

    if not settings.api_token:
        logger.warning(
            "API_TOKEN is not set, provider calls will be rejected",
            extra={"event": "missing_api_token"},
        )

    app.state.http_client = create_http_client(settings)

    yield

    logger.info("Shutting down City Weather API...")

    await app.state.http_client.aclose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    redirect_slashes=False,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    PathScopedCORSMiddleware,
    path_prefix=settings.cors_path_prefix,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

app.add_middleware(RequestTrackerMiddleware)

Instrumentator().instrument(app).expose(app, endpoint="/prometheus-metrics")

app.include_router(routes.router)


@app.exception_handler(StarletteHTTPException)
async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Unknown methods on a known path are treated as unknown routes
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "404 Not Found"})
    return await http_exception_handler(request, exc)


if __name__ == "__main__":
    uvicorn.run(
        "city_weather.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level=settings.log_level.lower(),
    )
