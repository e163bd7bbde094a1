r"""Retry predicates evaluated over the failure of an attempt."""

from __future__ import annotations

__all__ = ["ExceptionPredicate", "ExceptionTypePredicate"]

from typing import TYPE_CHECKING, Any

from aretryer.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class ExceptionTypePredicate(BaseRetryPredicate):
    """Retry predicate matching failures by exception type.

    Args:
        *exception_types: The exception types that trigger a retry.
            Defaults to ``Exception``, i.e. any failure.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates import ExceptionTypePredicate
        >>> predicate = ExceptionTypePredicate(ConnectionError, TimeoutError)
        >>> predicate.should_retry(Attempt.from_failure(TimeoutError(), 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_failure(ValueError(), 1, 0.0))
        False

        ```
    """

    def __init__(self, *exception_types: type[Exception]) -> None:
        if not exception_types:
            exception_types = (Exception,)
        for exception_type in exception_types:
            if not (isinstance(exception_type, type) and issubclass(exception_type, Exception)):
                msg = f"expected an Exception subclass, got {exception_type!r}"
                raise TypeError(msg)
        self.exception_types = tuple(exception_types)

    def __repr__(self) -> str:
        names = ", ".join(exception_type.__name__ for exception_type in self.exception_types)
        return f"{self.__class__.__qualname__}({names})"

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_failure and isinstance(attempt.failure, self.exception_types)


class ExceptionPredicate(BaseRetryPredicate):
    """Retry predicate evaluated over the exception of a failed attempt.

    Successful attempts are never retried by this predicate.

    Args:
        func: A function taking the exception and returning ``True`` to
            retry.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates import ExceptionPredicate
        >>> predicate = ExceptionPredicate(lambda exc: "transient" in str(exc))
        >>> predicate.should_retry(Attempt.from_failure(OSError("transient glitch"), 1, 0.0))
        True

        ```
    """

    def __init__(self, func: Callable[[Exception], bool]) -> None:
        self.func = func

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_failure and bool(self.func(attempt.failure))
