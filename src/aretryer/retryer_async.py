r"""Asynchronous retryer executing a coroutine function under a retry
policy."""

from __future__ import annotations

__all__ = ["AsyncRetryer"]

import asyncio
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
from aretryer.exceptions import RetryError
from aretryer.listeners.manager import ListenerManager
from aretryer.utils.structured_logging import call_id_context

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class AsyncRetryer(Generic[T]):
    """Executes an async operation, retrying it according to a retry
    policy.

    This is the asynchronous counterpart of ``Retryer``: the operation is
    awaited and the wait between two attempts uses ``asyncio.sleep``, so
    other tasks run while a call is waiting. The block strategy of the
    policy is not used. Listeners and strategies are still called
    synchronously and should be fast.

    Cancelling the task while it waits between two attempts stops the
    retry loop immediately: the ``asyncio.CancelledError`` propagates to
    the caller and no further attempt is made.

    Args:
        policy: The retry policy. Defaults to a policy that never
            retries.

    Attributes:
        policy: The retry policy.
        listeners: The manager notifying the listeners of the policy.

    Example:
        ```pycon
        >>> import asyncio
        >>> from aretryer import RetryerBuilder
        >>> from aretryer.stop import NeverStop
        >>> calls = []
        >>> async def fetch() -> str:
        ...     calls.append(1)
        ...     return "good" if len(calls) >= 2 else "sorry"
        ...
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_result(lambda result: result != "good")
        ...     .with_stop_strategy(NeverStop())
        ...     .build_async()
        ... )
        >>> asyncio.run(retryer.call(fetch))
        'good'

        ```
    """

    def __init__(self, policy: RetryPolicy | None = None) -> None:
        self.policy = policy if policy is not None else RetryPolicy()
        self.listeners = ListenerManager(self.policy.listeners)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(policy={self.policy!r})"

    async def call(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Execute the async operation until an attempt is accepted or the
        stop strategy fires.

        Args:
            operation: A zero-argument callable returning an awaitable,
                typically a coroutine function.

        Returns:
            The result of the accepted attempt.

        Raises:
            AttemptExecutionError: If the operation failed and no retry
                predicate rejected the failure.
            RetryError: If the stop strategy halted the retry loop.
            asyncio.CancelledError: If the task was cancelled.
        """
        with call_id_context():
            return await self._run(operation)

    def wrap(self, func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        """Decorate a coroutine function so that every call goes through
        ``call``.

        Args:
            func: The coroutine function to decorate.

        Returns:
            The decorated coroutine function.
        """

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            return await self.call(functools.partial(func, *args, **kwargs))

        return wrapper

    async def _run(self, operation: Callable[[], Awaitable[T]]) -> T:
        start_time = time.monotonic()
        attempt_number = 1
        while True:
            try:
                result = await operation()
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
                await asyncio.sleep(delay)
            except asyncio.CancelledError:
                logger.debug(f"Cancelled while waiting to retry after attempt {attempt_number}")
                raise
            attempt_number += 1
