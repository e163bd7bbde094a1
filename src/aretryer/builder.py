r"""Fluent builder assembling retry policies."""

from __future__ import annotations

__all__ = ["RetryerBuilder"]

import logging
from typing import TYPE_CHECKING, Any

from aretryer.block import BaseBlockStrategy, ThreadSleepBlockStrategy
from aretryer.core.config import DEFAULT_MAX_ATTEMPTS, DEFAULT_WAIT, RetryPolicy
from aretryer.listeners.base import BaseRetryListener, CallableRetryListener
from aretryer.predicates.base import BaseRetryPredicate, CallablePredicate
from aretryer.predicates.exception import ExceptionPredicate, ExceptionTypePredicate
from aretryer.predicates.result import ResultPredicate
from aretryer.retryer import Retryer
from aretryer.retryer_async import AsyncRetryer
from aretryer.stop.after_attempt import StopAfterAttempt
from aretryer.stop.base import BaseStopStrategy, CallableStopStrategy
from aretryer.wait.base import BaseWaitStrategy, CallableWaitStrategy
from aretryer.wait.fixed import FixedWait

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class RetryerBuilder:
    """Builder assembling a retry policy with chained calls.

    Retry predicates and listeners accumulate in call order. The stop,
    wait, and block strategies are single choices: setting one again
    replaces the previous value. ``build`` and ``build_async`` take a
    snapshot of the configuration, so modifying the builder afterwards
    does not change the retryers already built.

    Without any retry predicate, the built retryers execute the operation
    once and never retry. Without a stop strategy, they stop after the
    first attempt. Without a wait strategy, they retry immediately.

    Example:
        ```pycon
        >>> from aretryer import RetryerBuilder
        >>> from aretryer.stop import StopAfterAttempt
        >>> from aretryer.wait import FixedWait
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_exception_type(ConnectionError)
        ...     .retry_if_result(lambda result: result is None)
        ...     .with_stop_strategy(StopAfterAttempt(3))
        ...     .with_wait_strategy(FixedWait(1.0))
        ...     .build()
        ... )
        >>> len(retryer.policy.predicates)
        2

        ```
    """

    def __init__(self) -> None:
        self._predicates: list[BaseRetryPredicate] = []
        self._listeners: list[BaseRetryListener] = []
        self._stop_strategy: BaseStopStrategy | None = None
        self._wait_strategy: BaseWaitStrategy | None = None
        self._block_strategy: BaseBlockStrategy | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(predicates={len(self._predicates)}, "
            f"listeners={len(self._listeners)}, stop_strategy={self._stop_strategy!r}, "
            f"wait_strategy={self._wait_strategy!r})"
        )

    def retry_if_result(self, func: Callable[[Any], bool]) -> RetryerBuilder:
        """Retry when the operation returns a value for which ``func``
        returns ``True``.

        Args:
            func: A function taking the result of the operation.

        Returns:
            The builder.
        """
        _check_callable("func", func)
        self._predicates.append(ResultPredicate(func))
        return self

    def retry_if_exception(self, func: Callable[[Exception], bool] | None = None) -> RetryerBuilder:
        """Retry when the operation raises an exception.

        Args:
            func: Optional function taking the exception and returning
                ``True`` to retry. If None, every exception triggers a
                retry.

        Returns:
            The builder.
        """
        if func is None:
            self._predicates.append(ExceptionTypePredicate(Exception))
        else:
            _check_callable("func", func)
            self._predicates.append(ExceptionPredicate(func))
        return self

    def retry_if_exception_type(self, *exception_types: type[Exception]) -> RetryerBuilder:
        """Retry when the operation raises an exception of one of the
        given types.

        Args:
            *exception_types: The exception types. Defaults to
                ``Exception``.

        Returns:
            The builder.
        """
        self._predicates.append(ExceptionTypePredicate(*exception_types))
        return self

    def retry_if(
        self, predicate: BaseRetryPredicate | Callable[[Attempt[Any]], bool]
    ) -> RetryerBuilder:
        """Retry when the given predicate rejects the attempt.

        Args:
            predicate: A retry predicate, or a function taking the
                attempt and returning ``True`` to retry.

        Returns:
            The builder.
        """
        if not isinstance(predicate, BaseRetryPredicate):
            _check_callable("predicate", predicate)
            predicate = CallablePredicate(predicate)
        self._predicates.append(predicate)
        return self

    def with_stop_strategy(
        self, stop_strategy: BaseStopStrategy | Callable[[Attempt[Any]], bool]
    ) -> RetryerBuilder:
        """Set the stop strategy, replacing any previous one.

        Args:
            stop_strategy: A stop strategy, or a function taking the
                rejected attempt and returning ``True`` to stop.

        Returns:
            The builder.
        """
        if not isinstance(stop_strategy, BaseStopStrategy):
            _check_callable("stop_strategy", stop_strategy)
            stop_strategy = CallableStopStrategy(stop_strategy)
        if self._stop_strategy is not None:
            logger.debug(f"Replacing stop strategy {self._stop_strategy!r} with {stop_strategy!r}")
        self._stop_strategy = stop_strategy
        return self

    def with_wait_strategy(
        self, wait_strategy: BaseWaitStrategy | Callable[[Attempt[Any]], float]
    ) -> RetryerBuilder:
        """Set the wait strategy, replacing any previous one.

        Args:
            wait_strategy: A wait strategy, or a function taking the
                rejected attempt and returning the delay in seconds.

        Returns:
            The builder.
        """
        if not isinstance(wait_strategy, BaseWaitStrategy):
            _check_callable("wait_strategy", wait_strategy)
            wait_strategy = CallableWaitStrategy(wait_strategy)
        if self._wait_strategy is not None:
            logger.debug(f"Replacing wait strategy {self._wait_strategy!r} with {wait_strategy!r}")
        self._wait_strategy = wait_strategy
        return self

    def with_block_strategy(self, block_strategy: BaseBlockStrategy) -> RetryerBuilder:
        """Set the block strategy of synchronous retryers, replacing any
        previous one.

        Args:
            block_strategy: The block strategy.

        Returns:
            The builder.
        """
        if not isinstance(block_strategy, BaseBlockStrategy):
            msg = f"block_strategy must be a BaseBlockStrategy, got {type(block_strategy).__name__}"
            raise TypeError(msg)
        if self._block_strategy is not None:
            logger.debug(
                f"Replacing block strategy {self._block_strategy!r} with {block_strategy!r}"
            )
        self._block_strategy = block_strategy
        return self

    def with_retry_listener(
        self, listener: BaseRetryListener | Callable[[Attempt[Any]], Any]
    ) -> RetryerBuilder:
        """Add a listener notified of every attempt.

        Listeners are notified in the order they were added.

        Args:
            listener: A retry listener, or a function taking the attempt.

        Returns:
            The builder.
        """
        if not isinstance(listener, BaseRetryListener):
            _check_callable("listener", listener)
            listener = CallableRetryListener(listener)
        self._listeners.append(listener)
        return self

    def build_policy(self) -> RetryPolicy:
        """Build the immutable retry policy.

        Returns:
            A snapshot of the current configuration.
        """
        stop_strategy = self._stop_strategy
        if stop_strategy is None:
            stop_strategy = StopAfterAttempt(DEFAULT_MAX_ATTEMPTS)
        wait_strategy = self._wait_strategy
        if wait_strategy is None:
            wait_strategy = FixedWait(DEFAULT_WAIT)
        block_strategy = self._block_strategy
        if block_strategy is None:
            block_strategy = ThreadSleepBlockStrategy()
        return RetryPolicy(
            predicates=tuple(self._predicates),
            stop_strategy=stop_strategy,
            wait_strategy=wait_strategy,
            block_strategy=block_strategy,
            listeners=tuple(self._listeners),
        )

    def build(self) -> Retryer[Any]:
        """Build a synchronous retryer.

        Returns:
            The retryer.
        """
        return Retryer(self.build_policy())

    def build_async(self) -> AsyncRetryer[Any]:
        """Build an asynchronous retryer.

        Returns:
            The async retryer.
        """
        return AsyncRetryer(self.build_policy())


def _check_callable(name: str, value: object) -> None:
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise TypeError(msg)
