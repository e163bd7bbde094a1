r"""Synchronous retryer executing an operation under a retry policy."""

from __future__ import annotations

__all__ = ["Retryer"]

import functools
import logging
import time
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretryer.core.config import RetryPolicy
from aretryer.core.retry_logic import (
    compute_wait,
    make_attempt,
    resolve_accepted,
    should_retry,
    should_stop,
)
from aretryer.exceptions import RetryError, RetryInterruptedError
from aretryer.listeners.manager import ListenerManager
from aretryer.utils.structured_logging import call_id_context

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class Retryer(Generic[T]):
    """Executes an operation, retrying it according to a retry policy.

    The retry loop runs on the calling thread:

    1. Execute the operation and capture its result or exception in an
       ``Attempt``.
    2. Notify the listeners of the attempt, in registration order.
    3. If no retry predicate rejects the attempt, return the result, or
       raise ``AttemptExecutionError`` if the operation failed.
    4. If the stop strategy fires, raise ``RetryError``.
    5. Otherwise wait for the delay computed by the wait strategy and go
       back to 1.

    A retryer holds no per-call state, so a single instance can be used
    by several threads at the same time.

    Args:
        policy: The retry policy. Defaults to a policy that never
            retries. Use ``RetryerBuilder`` to assemble one.

    Attributes:
        policy: The retry policy.
        listeners: The manager notifying the listeners of the policy.

    Example:
        ```pycon
        >>> from aretryer import RetryerBuilder
        >>> from aretryer.stop import StopAfterAttempt
        >>> calls = []
        >>> def flaky() -> str:
        ...     calls.append(1)
        ...     if len(calls) < 3:
        ...         raise RuntimeError("sorry")
        ...     return "good"
        ...
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_exception_type(RuntimeError)
        ...     .with_stop_strategy(StopAfterAttempt(5))
        ...     .build()
        ... )
        >>> retryer.call(flaky)
        'good'
        >>> len(calls)
        3

        ```
    """

    def __init__(self, policy: RetryPolicy | None = None) -> None:
        self.policy = policy if policy is not None else RetryPolicy()
        self.listeners = ListenerManager(self.policy.listeners)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r})"

    def call(self, operation: Callable[[], T]) -> T:
        """Execute the operation until an attempt is accepted or the stop
        strategy fires.

        Args:
            operation: A zero-argument callable. Only ``Exception``
                subclasses it raises are captured; other exceptions
                (e.g. ``KeyboardInterrupt``) propagate immediately.

        Returns:
            The result of the accepted attempt.

        Raises:
            AttemptExecutionError: If the operation failed and no retry
                predicate rejected the failure.
            RetryError: If the stop strategy halted the retry loop.
            RetryInterruptedError: If the wait before the next attempt
                was interrupted.
        """
        with call_id_context():
            return self._run(operation)

    def wrap(self, func: Callable[..., T]) -> Callable[..., T]:
        """Decorate a function so that every call goes through ``call``.

        Args:
            func: The function to decorate.

        Returns:
            The decorated function.

        Example:
            ```pycon
            >>> from aretryer import Retryer
            >>> retryer = Retryer()
            >>> @retryer.wrap
            ... def add(a: int, b: int) -> int:
            ...     return a + b
            ...
            >>> add(1, 2)
            3

            ```
        """

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return self.call(functools.partial(func, *args, **kwargs))

        return wrapper

    def _run(self, operation: Callable[[], T]) -> T:
        start_time = time.monotonic()
        attempt_number = 1
        while True:
            try:
                result = operation()
            except Exception as exc:  # noqa: BLE001
                attempt = make_attempt(attempt_number, start_time, failure=exc)
            else:
                attempt = make_attempt(attempt_number, start_time, result=result)

            self.listeners.notify(attempt)

            if not should_retry(self.policy, attempt):
                logger.debug(f"Attempt {attempt_number} accepted")
                return resolve_accepted(attempt)

            if should_stop(self.policy, attempt):
                logger.debug(f"Attempt {attempt_number} rejected, stopping")
                raise RetryError(attempt_number, attempt)

            delay = compute_wait(self.policy, attempt)
            logger.debug(
                f"Attempt {attempt_number} rejected, waiting {delay:.2f}s "
                f"before attempt {attempt_number + 1}"
            )
            try:
                self.policy.block_strategy.block(delay)
            except InterruptedError as exc:
                logger.debug(f"Interrupted while waiting to retry after attempt {attempt_number}")
                raise RetryInterruptedError(attempt, cause=exc) from exc
            attempt_number += 1
