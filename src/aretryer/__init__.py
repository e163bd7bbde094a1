r"""aretryer - Retry arbitrary operations under composable retry policies.

This package executes an operation that may fail or return an
unacceptable result, and retries it under a policy made of retry
predicates, a stop strategy, a wait strategy, and listeners. It takes
care of the parts of a retry loop that are easy to get wrong: attempt
counting, backoff arithmetic, interruption of the wait, and visibility
into intermediate failures.

Key Features:
    - Retry on results, exception types, or arbitrary predicates
    - Stop after a number of attempts, after a delay, or never
    - Fixed, incrementing, exponential, Fibonacci, random, and joined waits
    - Listeners notified of every attempt, in registration order
    - Immutable policies shareable across threads and asyncio tasks
    - Synchronous and asynchronous retryers
    - Predicates for transient HTTP failures of httpx requests

Example:
    ```pycon
    >>> from aretryer import RetryerBuilder
    >>> from aretryer.strategies import fixed_wait, stop_after_attempt
    >>> retryer = (
    ...     RetryerBuilder()
    ...     .retry_if_exception_type(ConnectionError)
    ...     .with_stop_strategy(stop_after_attempt(3))
    ...     .with_wait_strategy(fixed_wait(1.0))
    ...     .build()
    ... )
    >>> retryer.call(lambda: "good")
    'good'

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryer",
    "Attempt",
    "AttemptExecutionError",
    "AttemptStateError",
    "RetryError",
    "RetryInterruptedError",
    "RetryPolicy",
    "Retryer",
    "RetryerBuilder",
    "RetryerError",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretryer.attempt import Attempt
from aretryer.builder import RetryerBuilder
from aretryer.core.config import RetryPolicy
from aretryer.exceptions import (
    AttemptExecutionError,
    AttemptStateError,
    RetryError,
    RetryerError,
    RetryInterruptedError,
)
from aretryer.retryer import Retryer
from aretryer.retryer_async import AsyncRetryer

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
