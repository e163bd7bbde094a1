r"""Immutable retry policy and default configuration values.

This module provides the configuration constants and the frozen
dataclass assembled by ``RetryerBuilder`` and executed by ``Retryer``
and ``AsyncRetryer``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_WAIT",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
]

from dataclasses import dataclass, field

from aretryer.block import BaseBlockStrategy, ThreadSleepBlockStrategy
from aretryer.listeners.base import BaseRetryListener
from aretryer.predicates.base import BaseRetryPredicate
from aretryer.stop.after_attempt import StopAfterAttempt
from aretryer.stop.base import BaseStopStrategy
from aretryer.wait.base import BaseWaitStrategy
from aretryer.wait.fixed import FixedWait

# Default maximum number of attempts
# A single attempt means the operation is never retried
DEFAULT_MAX_ATTEMPTS = 1

# Default delay in seconds between two attempts
DEFAULT_WAIT = 0.0

# HTTP status codes that signal a transient condition
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


@dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry policy.

    A policy is safe to share between threads and tasks: every call keeps
    its own loop state, and the strategies are pure functions of the
    attempt they receive.

    Args:
        predicates: The retry predicates, combined with a logical OR.
            Without predicates, no attempt is ever retried.
        stop_strategy: The strategy deciding when the retry budget is
            exhausted. Defaults to a single attempt.
        wait_strategy: The strategy computing the delay between two
            attempts. Defaults to no delay.
        block_strategy: The strategy performing the wait in synchronous
            retryers. Defaults to ``time.sleep``.
        listeners: The listeners notified of every attempt, in order.

    Example:
        ```pycon
        >>> from aretryer.core import RetryPolicy
        >>> policy = RetryPolicy()
        >>> policy.stop_strategy
        StopAfterAttempt(max_attempts=1)
        >>> policy.wait_strategy
        FixedWait(delay=0.0)

        ```
    """

    predicates: tuple[BaseRetryPredicate, ...] = ()
    stop_strategy: BaseStopStrategy = field(
        default_factory=lambda: StopAfterAttempt(DEFAULT_MAX_ATTEMPTS)
    )
    wait_strategy: BaseWaitStrategy = field(default_factory=lambda: FixedWait(DEFAULT_WAIT))
    block_strategy: BaseBlockStrategy = field(default_factory=ThreadSleepBlockStrategy)
    listeners: tuple[BaseRetryListener, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable but store tuples so the policy stays immutable.
        object.__setattr__(self, "predicates", tuple(self.predicates))
        object.__setattr__(self, "listeners", tuple(self.listeners))
        for predicate in self.predicates:
            _check_type("predicate", predicate, BaseRetryPredicate)
        for listener in self.listeners:
            _check_type("listener", listener, BaseRetryListener)
        _check_type("stop_strategy", self.stop_strategy, BaseStopStrategy)
        _check_type("wait_strategy", self.wait_strategy, BaseWaitStrategy)
        _check_type("block_strategy", self.block_strategy, BaseBlockStrategy)


def _check_type(name: str, value: object, expected: type) -> None:
    if not isinstance(value, expected):
        msg = f"{name} must be a {expected.__name__}, got {type(value).__name__}"
        raise TypeError(msg)
