"""
Retry and timing helpers.
"""
import logging
import time
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def wait(seconds: float) -> None:
    time.sleep(seconds)


def retry(
    action: Callable[[], T],
    max_attempts: int = 3,
    delay: float = 1.0,
    exceptions: tuple[type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = wait,
) -> T:
    """
    Call action until it succeeds, waiting delay * attempt between tries.

    Args:
        action: Zero-argument callable
        max_attempts: Total number of calls, at least 1
        delay: Base delay in seconds
        exceptions: Exception types that trigger another attempt
        sleep: Sleep function (injected in tests)

    Returns:
        The first successful result

    Raises:
        The last exception once max_attempts calls have failed
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    for attempt in range(1, max_attempts):
        try:
            return action()
        except exceptions as e:
            logger.debug("Attempt %d/%d failed: %s", attempt, max_attempts, e)
            sleep(delay * attempt)
    return action()


def measure_action_time(action: Callable[[], object]) -> float:
    """Run action and return its wall-clock duration in seconds."""
    start = time.perf_counter()
    action()
    return time.perf_counter() - start
