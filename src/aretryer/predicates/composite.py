r"""Retry predicate combining several predicates."""

from __future__ import annotations

__all__ = ["AnyPredicate"]

from typing import TYPE_CHECKING, Any

from aretryer.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretryer.attempt import Attempt


class AnyPredicate(BaseRetryPredicate):
    """Retry predicate combining several predicates with a logical OR.

    The predicates are evaluated in order and the evaluation stops at the
    first one requesting a retry. Without predicates, no attempt is ever
    retried.

    Args:
        predicates: The predicates to combine.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates import AnyPredicate, ExceptionTypePredicate, ResultPredicate
        >>> predicate = AnyPredicate([ResultPredicate(lambda r: r is None), ExceptionTypePredicate()])
        >>> predicate.should_retry(Attempt.from_result(None, 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_failure(RuntimeError(), 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_result("good", 1, 0.0))
        False
        >>> AnyPredicate([]).should_retry(Attempt.from_failure(RuntimeError(), 1, 0.0))
        False

        ```
    """

    def __init__(self, predicates: Iterable[BaseRetryPredicate]) -> None:
        self.predicates = tuple(predicates)

    def __len__(self) -> int:
        return len(self.predicates)

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return any(predicate.should_retry(attempt) for predicate in self.predicates)
