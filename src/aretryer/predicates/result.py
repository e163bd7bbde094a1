r"""Retry predicate evaluated over the result of an attempt."""

from __future__ import annotations

__all__ = ["ResultPredicate"]

from typing import TYPE_CHECKING, Any

from aretryer.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class ResultPredicate(BaseRetryPredicate):
    """Retry predicate evaluated over the value returned by the operation.

    Failed attempts are never retried by this predicate: the function is
    only called with results. Combine it with an exception predicate to
    also retry failures.

    Args:
        func: A function taking the result and returning ``True`` to
            retry.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates import ResultPredicate
        >>> predicate = ResultPredicate(lambda result: "good" not in result)
        >>> predicate.should_retry(Attempt.from_result("sorry", 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_result("good", 2, 0.0))
        False
        >>> predicate.should_retry(Attempt.from_failure(RuntimeError("sorry"), 1, 0.0))
        False

        ```
    """

    def __init__(self, func: Callable[[Any], bool]) -> None:
        self.func = func

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_result and bool(self.func(attempt.result))
