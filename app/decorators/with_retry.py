"""Retry policy for calls to the hosted model."""

from collections.abc import Awaitable, Callable
from functools import wraps
from logging import getLogger
from typing import ParamSpec, TypeVar

from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from app.configs import file_logger, settings
from app.errors.ai import AiNetworkError

logger = file_logger(getLogger(__name__))

P = ParamSpec("P")
T = TypeVar("T")


def _log_retry(retry_state: RetryCallState) -> None:
    exception = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    name = getattr(retry_state.fn, "__name__", "model call")
    logger.warning(
        f"{name} attempt {retry_state.attempt_number}/{settings.AI_MAX_RETRIES} failed, "
        f"retrying in {delay:.2f}s: {exception}",
    )


def with_retry(
    retry_on: tuple[type[Exception], ...] = (AiNetworkError,),
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Retry an async model call with exponential backoff.

    The policy is read from settings on every call: ``AI_MAX_RETRIES`` caps
    the attempts (the first call included), ``AI_RETRY_DELAY`` is the backoff
    multiplier and ``AI_REQUEST_TIMEOUT`` bounds a single wait.

    Args:
        retry_on: Exception types worth another attempt. Anything else
            propagates at once.

    Returns:
        Decorator that re-raises the last exception once attempts run out.
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            retrying = AsyncRetrying(
                stop=stop_after_attempt(max(settings.AI_MAX_RETRIES, 1)),
                wait=wait_exponential(
                    multiplier=settings.AI_RETRY_DELAY,
                    max=settings.AI_REQUEST_TIMEOUT,
                ),
                retry=retry_if_exception_type(retry_on),
                before_sleep=_log_retry,
                reraise=True,
            )
            return await retrying(func, *args, **kwargs)

        return wrapper

    return decorator
