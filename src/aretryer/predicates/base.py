r"""Abstract base class for retry predicates."""

from __future__ import annotations

__all__ = ["BaseRetryPredicate", "CallablePredicate"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class BaseRetryPredicate(ABC):
    """Abstract base class for retry predicates.

    A retry predicate decides whether the outcome of an attempt is
    unacceptable and should trigger another attempt.
    """

    @abstractmethod
    def should_retry(self, attempt: Attempt[Any]) -> bool:
        """Decide whether the attempt should be retried.

        Args:
            attempt: The attempt to evaluate.

        Returns:
            ``True`` if the outcome is rejected.
        """


class CallablePredicate(BaseRetryPredicate):
    """Retry predicate delegating to a user-supplied function over the
    whole attempt.

    Args:
        func: A function taking the attempt and returning ``True`` to
            retry.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates import CallablePredicate
        >>> predicate = CallablePredicate(lambda attempt: attempt.delay_since_first_attempt < 1.0)
        >>> predicate.should_retry(Attempt.from_result("sorry", 1, 0.2))
        True

        ```
    """

    def __init__(self, func: Callable[[Attempt[Any]], bool]) -> None:
        self.func = func

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return bool(self.func(attempt))
