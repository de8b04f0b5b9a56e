"""
Resilience utilities for outbound provider calls.
"""

import httpx
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from city_weather.utils.logger import setup_logger

logger = setup_logger(__name__)

RETRYABLE_EXCEPTIONS = (httpx.TimeoutException, httpx.NetworkError)


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    logger.warning(
        "Provider call failed, retrying",
        extra={
            "event": "provider_retry_attempt",
            "attempt": retry_state.attempt_number,
            "error": str(error),
            "error_type": type(error).__name__,
        },
    )


def provider_retry(max_attempts: int, wait_max: float) -> AsyncRetrying:
    """
    Build the retry policy for a single provider request.

    Only transport failures (timeouts, connection errors) are retried.
    HTTP error statuses and malformed payloads are returned to the caller
    on the first attempt. With ``max_attempts=1`` the request runs once and
    its exception propagates unchanged.

    Usage:
        async for attempt in provider_retry(3, 4.0):
            with attempt:
                response = await client.get(url)
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=0.5, min=0, max=wait_max),
        retry=retry_if_exception_type(RETRYABLE_EXCEPTIONS),
        before_sleep=_log_retry,
        reraise=True,
    )
