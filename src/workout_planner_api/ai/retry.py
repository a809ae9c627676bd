"""Retry utilities for inference calls with a fixed delay between attempts."""
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception,
    stop_after_attempt,
    wait_fixed,
)

from workout_planner_api.ai.errors import RateLimitedError, RateLimitSignal


logger = logging.getLogger(__name__)

T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[None]]

# Default retry configuration
DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_DELAY_SECONDS = 1.0


def is_retryable_error(exception: BaseException) -> bool:
    """
    Determine if an exception is retryable.

    Only a rate-limit answer (HTTP 429) is retried. Authentication, transport,
    other status codes and malformed bodies are terminal on the first attempt.
    """
    return isinstance(exception, RateLimitSignal)


def create_async_retrying(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    sleep: Optional[SleepFunc] = None,
) -> AsyncRetrying:
    """
    Create a bounded, fixed-delay retry controller.

    Args:
        max_attempts: Total number of attempts, including the first
        delay_seconds: Fixed wait between attempts
        sleep: Awaitable sleep replacement (tests pass a mock)

    Returns:
        An AsyncRetrying instance that raises RetryError once exhausted
    """
    kwargs: dict[str, Any] = {
        "retry": retry_if_exception(is_retryable_error),
        "stop": stop_after_attempt(max_attempts),
        "wait": wait_fixed(delay_seconds),
        "before_sleep": before_sleep_log(logger, logging.WARNING),
        "reraise": False,
    }
    if sleep is not None:
        kwargs["sleep"] = sleep
    return AsyncRetrying(**kwargs)


async def retry_async_call(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    sleep: Optional[SleepFunc] = None,
    **kwargs: Any,
) -> T:
    """
    Execute an async function, retrying while it is rate limited.

    Args:
        func: Async function to execute
        *args: Positional arguments for the function
        max_attempts: Total number of attempts
        delay_seconds: Fixed wait between attempts
        sleep: Awaitable sleep replacement
        **kwargs: Keyword arguments for the function

    Returns:
        Result of the function call

    Raises:
        RateLimitedError: If every attempt was rate limited
        Exception: Any non-retryable error, unchanged, on first occurrence
    """
    retrying = create_async_retrying(
        max_attempts=max_attempts,
        delay_seconds=delay_seconds,
        sleep=sleep,
    )

    try:
        async for attempt in retrying:
            with attempt:
                result = await func(*args, **kwargs)
    except RetryError as e:
        logger.error(f"All {max_attempts} attempts were rate limited")
        raise RateLimitedError(max_attempts) from e.last_attempt.exception()

    return result
