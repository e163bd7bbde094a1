r"""Factory functions for the built-in stop, wait, and block strategies.

These functions are shortcuts for the strategy classes, so a retry
policy reads as a sentence:

```python
from aretryer import RetryerBuilder
from aretryer.strategies import exponential_wait, fixed_wait, join, stop_after_attempt

retryer = (
    RetryerBuilder()
    .retry_if_exception()
    .with_stop_strategy(stop_after_attempt(5))
    .with_wait_strategy(join(exponential_wait(0.025, 0.5), fixed_wait(0.05)))
    .build()
)
```
"""

from __future__ import annotations

__all__ = [
    "event_block",
    "exception_wait",
    "exponential_wait",
    "fibonacci_wait",
    "fixed_wait",
    "incrementing_wait",
    "join",
    "never_stop",
    "no_wait",
    "random_wait",
    "stop_after_attempt",
    "stop_after_delay",
    "thread_sleep",
]

from typing import TYPE_CHECKING, TypeVar

from aretryer.block import EventBlockStrategy, ThreadSleepBlockStrategy
from aretryer.stop import NeverStop, StopAfterAttempt, StopAfterDelay
from aretryer.wait import (
    ExceptionWait,
    ExponentialWait,
    FibonacciWait,
    FixedWait,
    IncrementingWait,
    JoinWait,
    RandomWait,
)

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretryer.wait import BaseWaitStrategy

E = TypeVar("E", bound=Exception)


def never_stop() -> NeverStop:
    """Return a stop strategy that never stops."""
    return NeverStop()


def stop_after_attempt(max_attempts: int) -> StopAfterAttempt:
    """Return a stop strategy that stops after ``max_attempts`` attempts.

    Args:
        max_attempts: The maximum number of attempts, >= 1.
    """
    return StopAfterAttempt(max_attempts)


def stop_after_delay(max_delay: float) -> StopAfterDelay:
    """Return a stop strategy that stops once ``max_delay`` seconds have
    elapsed since the first attempt started.

    Args:
        max_delay: The time budget in seconds, >= 0.
    """
    return StopAfterDelay(max_delay)


def no_wait() -> FixedWait:
    """Return a wait strategy that retries immediately."""
    return FixedWait(0.0)


def fixed_wait(delay: float) -> FixedWait:
    """Return a wait strategy that always waits ``delay`` seconds.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.strategies import fixed_wait
        >>> fixed_wait(1.0).compute(Attempt.from_result(None, 7, 0.0))
        1.0

        ```
    """
    return FixedWait(delay)


def incrementing_wait(initial: float, increment: float) -> IncrementingWait:
    """Return a wait strategy that waits ``initial`` seconds after the
    first attempt, and ``increment`` more seconds after each further one.
    """
    return IncrementingWait(initial=initial, increment=increment)


def exponential_wait(multiplier: float = 1.0, max_wait: float | None = None) -> ExponentialWait:
    """Return a wait strategy that waits ``multiplier * 2 ** (n - 1)``
    seconds after attempt ``n``, capped at ``max_wait``.
    """
    return ExponentialWait(multiplier=multiplier, max_wait=max_wait)


def fibonacci_wait(multiplier: float = 1.0, max_wait: float | None = None) -> FibonacciWait:
    """Return a wait strategy that waits ``multiplier * fib(n)`` seconds
    after attempt ``n``, capped at ``max_wait``.
    """
    return FibonacciWait(multiplier=multiplier, max_wait=max_wait)


def random_wait(minimum: float = 0.0, maximum: float = 1.0) -> RandomWait:
    """Return a wait strategy that waits a random delay in [minimum,
    maximum]."""
    return RandomWait(minimum=minimum, maximum=maximum)


def exception_wait(exception_type: type[E], func: Callable[[E], float]) -> ExceptionWait[E]:
    """Return a wait strategy computing the delay from the exception of
    failed attempts of type ``exception_type``."""
    return ExceptionWait(exception_type, func)


def join(*strategies: BaseWaitStrategy) -> JoinWait:
    """Return a wait strategy summing the delays of ``strategies``.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.strategies import exponential_wait, fixed_wait, join
        >>> strategy = join(exponential_wait(0.25, 5.0), fixed_wait(0.5))
        >>> strategy.compute(Attempt.from_result(None, 1, 0.0))
        0.75

        ```
    """
    return JoinWait(*strategies)


def thread_sleep() -> ThreadSleepBlockStrategy:
    """Return a block strategy sleeping with ``time.sleep``."""
    return ThreadSleepBlockStrategy()


def event_block(event: threading.Event) -> EventBlockStrategy:
    """Return a block strategy interrupted when ``event`` is set."""
    return EventBlockStrategy(event)
