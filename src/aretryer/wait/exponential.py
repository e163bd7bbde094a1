r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWait"]

import math
from typing import TYPE_CHECKING, Any

from aretryer.utils.validation import validate_non_negative, validate_positive
from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class ExponentialWait(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates delay as: multiplier * 2 ** (attempt_number - 1), with
    optional max_wait cap. When the computed delay is too large to be
    represented as a float, it saturates at max_wait instead of failing.

    Args:
        multiplier: The delay in seconds after the first attempt
            (default: 1.0).
        max_wait: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import ExponentialWait
        >>> strategy = ExponentialWait(multiplier=0.5)
        >>> strategy.compute(Attempt.from_result(None, 1, 0.0))
        0.5
        >>> strategy.compute(Attempt.from_result(None, 2, 0.0))
        1.0
        >>> strategy.compute(Attempt.from_result(None, 3, 0.0))
        2.0
        >>> # With max_wait cap
        >>> strategy = ExponentialWait(multiplier=1.0, max_wait=5.0)
        >>> strategy.compute(Attempt.from_result(None, 10, 0.0))  # Would be 512.0, but capped
        5.0

        ```
    """

    def __init__(self, multiplier: float = 1.0, max_wait: float | None = None) -> None:
        validate_non_negative("multiplier", multiplier)
        if max_wait is not None:
            validate_positive("max_wait", max_wait)
        self.multiplier = multiplier
        self.max_wait = max_wait

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(multiplier={self.multiplier}, "
            f"max_wait={self.max_wait})"
        )

    def compute(self, attempt: Attempt[Any]) -> float:
        try:
            delay = math.ldexp(self.multiplier, attempt.attempt_number - 1)
        except OverflowError:
            delay = math.inf
        if self.max_wait is not None:
            delay = min(delay, self.max_wait)
        return delay
