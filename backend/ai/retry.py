"""Retry utilities for AI API calls with exponential backoff."""
import logging
from typing import Any, Awaitable, Callable, TypeVar

import openai
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)


logger = logging.getLogger(__name__)

T = TypeVar("T")

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT_SECONDS = 1
DEFAULT_MAX_WAIT_SECONDS = 10

_RETRYABLE_TYPES = (
    openai.RateLimitError,
    openai.APITimeoutError,
    openai.APIConnectionError,
    openai.InternalServerError,
)
_NON_RETRYABLE_TYPES = (
    openai.AuthenticationError,
    openai.PermissionDeniedError,
    openai.BadRequestError,
    openai.NotFoundError,
)


def is_retryable_error(exception: BaseException) -> bool:
    """
    Determine if an exception is retryable.

    Uses both exception type checking and string matching for robustness.

    Retryable errors include:
    - Rate limit errors (429)
    - Server errors (5xx)
    - Timeout errors
    - Connection errors

    Non-retryable errors include:
    - Authentication errors (401)
    - Bad request errors (400)
    - Not found errors (404)
    - Insufficient quota errors
    """
    # Check exception type first (more reliable)
    if isinstance(exception, _RETRYABLE_TYPES):
        return True
    if isinstance(exception, _NON_RETRYABLE_TYPES):
        return False

    # Fall back to string matching for errors raised outside the SDK
    error_str = str(exception).lower()
    exception_type_str = type(exception).__name__.lower()

    if "quota" in error_str and "exceeded" in error_str:
        return False

    if "rate" in error_str and "limit" in error_str:
        return True
    if "429" in error_str:
        return True

    if any(code in error_str for code in ["500", "502", "503", "504"]):
        return True

    if "timeout" in error_str or "timed out" in error_str:
        return True
    if "timeout" in exception_type_str:
        return True

    if "connection" in error_str or "connect" in exception_type_str:
        return True

    if "temporary failure in name resolution" in error_str:
        return True

    # Default: don't retry unknown errors
    return False


def _validate_retry_params(
    max_attempts: int,
    min_wait_seconds: float,
    max_wait_seconds: float,
) -> None:
    """
    Validate retry parameters.

    Raises:
        ValueError: If any parameter is invalid
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    if min_wait_seconds <= 0:
        raise ValueError(f"min_wait_seconds must be positive, got {min_wait_seconds}")
    if max_wait_seconds <= 0:
        raise ValueError(f"max_wait_seconds must be positive, got {max_wait_seconds}")
    if min_wait_seconds > max_wait_seconds:
        raise ValueError(
            f"min_wait_seconds ({min_wait_seconds}) cannot exceed "
            f"max_wait_seconds ({max_wait_seconds})"
        )


def create_async_retrying(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
) -> AsyncRetrying:
    """
    Create a tenacity AsyncRetrying controller with exponential backoff.

    Only errors accepted by `is_retryable_error` are retried; anything else
    is re-raised immediately.

    Raises:
        ValueError: If parameters are invalid
    """
    _validate_retry_params(max_attempts, min_wait_seconds, max_wait_seconds)

    return AsyncRetrying(
        retry=retry_if_exception(is_retryable_error),
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(
            multiplier=min_wait_seconds,
            min=min_wait_seconds,
            max=max_wait_seconds,
        ),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


async def retry_async_call(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait_seconds: float = DEFAULT_MIN_WAIT_SECONDS,
    max_wait_seconds: float = DEFAULT_MAX_WAIT_SECONDS,
    **kwargs: Any,
) -> T:
    """
    Execute an async function with retry logic.

    Args:
        func: Async function to execute
        *args: Positional arguments for the function
        max_attempts: Maximum number of attempts
        min_wait_seconds: Minimum wait time between retries
        max_wait_seconds: Maximum wait time between retries
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function call

    Raises:
        Exception: The last error once attempts are exhausted, or the first
            non-retryable error
        ValueError: If parameters are invalid
    """
    retrying = create_async_retrying(max_attempts, min_wait_seconds, max_wait_seconds)

    async for attempt in retrying:
        with attempt:
            result = await func(*args, **kwargs)
    return result
