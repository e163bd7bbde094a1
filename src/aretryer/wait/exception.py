r"""Wait strategy computing the delay from the failure of the attempt."""

from __future__ import annotations

__all__ = ["ExceptionWait"]

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt

E = TypeVar("E", bound=Exception)


class ExceptionWait(BaseWaitStrategy, Generic[E]):
    """Wait strategy computing the delay from the exception of a failed
    attempt.

    This is useful when the failure itself carries a hint, e.g. a rate
    limit error exposing the number of seconds before the quota resets.
    Attempts that returned a result, or failed with another exception
    type, get no delay from this strategy.

    Args:
        exception_type: The exception type this strategy handles.
        func: A function taking the exception and returning the delay
            in seconds.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import ExceptionWait
        >>> class RateLimitError(Exception):
        ...     def __init__(self, retry_after: float) -> None:
        ...         super().__init__(f"retry after {retry_after}s")
        ...         self.retry_after = retry_after
        ...
        >>> strategy = ExceptionWait(RateLimitError, lambda exc: exc.retry_after)
        >>> strategy.compute(Attempt.from_failure(RateLimitError(2.5), 1, 0.0))
        2.5
        >>> strategy.compute(Attempt.from_failure(ValueError("bad"), 1, 0.0))
        0.0

        ```
    """

    def __init__(self, exception_type: type[E], func: Callable[[E], float]) -> None:
        self.exception_type = exception_type
        self.func = func

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(exception_type={self.exception_type.__name__})"

    def compute(self, attempt: Attempt[Any]) -> float:
        if attempt.has_failure and isinstance(attempt.failure, self.exception_type):
            return self.func(attempt.failure)
        return 0.0
