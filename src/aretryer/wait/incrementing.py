r"""Incrementing (linear) wait strategy."""

from __future__ import annotations

__all__ = ["IncrementingWait"]

from typing import TYPE_CHECKING, Any

from aretryer.utils.validation import validate_non_negative
from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class IncrementingWait(BaseWaitStrategy):
    """Incrementing wait strategy.

    Calculates delay as: initial + increment * (attempt_number - 1).

    The delay grows linearly without bound. The increment may be negative
    to shrink the delay over time, in which case the delay is clamped at
    zero.

    Args:
        initial: The delay in seconds after the first attempt.
        increment: The delay in seconds added after each further attempt.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import IncrementingWait
        >>> strategy = IncrementingWait(initial=1.0, increment=0.5)
        >>> strategy.compute(Attempt.from_result(None, 1, 0.0))
        1.0
        >>> strategy.compute(Attempt.from_result(None, 2, 0.0))
        1.5
        >>> strategy.compute(Attempt.from_result(None, 5, 0.0))
        3.0

        ```
    """

    def __init__(self, initial: float = 0.0, increment: float = 1.0) -> None:
        validate_non_negative("initial", initial)
        self.initial = initial
        self.increment = increment

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial={self.initial}, increment={self.increment})"
        )

    def compute(self, attempt: Attempt[Any]) -> float:
        delay = self.initial + self.increment * (attempt.attempt_number - 1)
        return max(delay, 0.0)
