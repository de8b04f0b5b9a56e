import logging
import sys

from pythonjsonlogger import jsonlogger

from city_weather.config import get_settings

settings = get_settings()

# httpx logs every request URL at INFO, and provider URLs carry the appid
_NOISY_LOGGERS = ("httpx", "httpcore")


def _build_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            rename_fields={"levelname": "level"},
            static_fields={"service": settings.app_name, "version": settings.app_version},
        )
    )
    return handler


def setup_logger(name: str) -> logging.Logger:
    """
    Set up a service logger that writes one JSON object per line to stdout.

    Every record carries the service name and version, so logs from
    several deployments can share one sink.

    Args:
        name: The name of the logger (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    level = getattr(logging, settings.log_level.upper())
    logger.setLevel(level)
    logger.addHandler(_build_handler(level))
    logger.propagate = False

    for noisy in _NOISY_LOGGERS:
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))

    return logger
