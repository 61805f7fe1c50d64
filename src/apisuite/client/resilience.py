import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TypeVar

from loguru import logger
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    retry_if_not_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from apisuite.constants import DEFAULT_MAX_RETRIES, DEFAULT_POLL_INTERVAL_MS, DEFAULT_TIMEOUT_MS
from apisuite.exceptions import ConditionTimeoutError, ResponseAssertionError

__all__ = ["NOT_RETRIED", "SleepFn", "retry_request", "wait_for_condition"]

T = TypeVar("T")
SleepFn = Callable[[float], Awaitable[None]]

NOT_RETRIED: tuple[type[BaseException], ...] = (ResponseAssertionError, ConditionTimeoutError)


async def wait_for_condition(
    condition: Callable[[], Awaitable[bool]],
    timeout_ms: float = DEFAULT_TIMEOUT_MS,
    *,
    interval_ms: float = DEFAULT_POLL_INTERVAL_MS,
    sleep: SleepFn = asyncio.sleep,
) -> bool:
    """
    Poll an async predicate until it returns a truthy value.

    Elapsed time is measured on the monotonic clock from the first check, so
    `sleep` must actually let time pass for the timeout to ever be reached.

    Args:
        condition: Zero-argument coroutine function to evaluate.
        timeout_ms: Give up once this much time has passed.
        interval_ms: Pause between two checks.
        sleep: Coroutine used to wait between checks.

    Returns:
        True as soon as the predicate holds.

    Raises:
        ConditionTimeoutError: If the predicate never held within `timeout_ms`.
    """
    start = time.monotonic()
    checks = 0
    while (time.monotonic() - start) * 1000 < timeout_ms:
        checks += 1
        if await condition():
            logger.debug(f"Condition met after {checks} check(s)")
            return True
        await sleep(interval_ms / 1000)

    logger.debug(f"Condition still false after {checks} check(s) and {timeout_ms}ms")
    raise ConditionTimeoutError(timeout_ms)


def _log_retry(retry_state: RetryCallState) -> None:
    error = retry_state.outcome.exception() if retry_state.outcome else None
    delay = retry_state.next_action.sleep if retry_state.next_action else 0
    logger.warning(
        f"Attempt {retry_state.attempt_number} failed ({error!r}), retrying in {delay:g}s"
    )


async def retry_request(
    request_fn: Callable[[], Awaitable[T]],
    max_retries: int = DEFAULT_MAX_RETRIES,
    *,
    retry_on: tuple[type[BaseException], ...] | None = None,
    sleep: SleepFn = asyncio.sleep,
) -> T:
    """
    Call `request_fn` until it succeeds, at most `max_retries` times in total.

    Waits 1s, 2s, 4s, ... between attempts and never after the last one.
    The error from the final attempt is re-raised as is.

    Args:
        request_fn: Zero-argument coroutine function performing the request.
        max_retries: Total number of attempts, at least 1.
        retry_on: Exception types that trigger another attempt; others propagate at once.
            By default any exception except the assertion and poll timeout errors
            in `NOT_RETRIED`. Name those here to retry them as well.
        sleep: Coroutine used to wait between attempts.
    """
    if max_retries < 1:
        raise ValueError(f"max_retries must be at least 1, got {max_retries}")

    if retry_on is None:
        retry = retry_if_exception_type(Exception) & retry_if_not_exception_type(NOT_RETRIED)
    else:
        retry = retry_if_exception_type(retry_on)

    retrying = AsyncRetrying(
        sleep=sleep,
        stop=stop_after_attempt(max_retries),
        wait=wait_exponential(multiplier=1, exp_base=2),
        retry=retry,
        before_sleep=_log_retry,
        reraise=True,
    )
    return await retrying(request_fn)
