r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWait"]

import math
from typing import TYPE_CHECKING, Any

from aretryer.utils.validation import validate_non_negative, validate_positive
from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class FibonacciWait(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates delay as: multiplier * fibonacci(attempt_number), with
    optional max_wait cap, where fibonacci(1) = fibonacci(2) = 1.
    When the computed delay is too large to be represented as a float,
    it saturates at max_wait, or at infinity when uncapped.

    The Fibonacci sequence (1, 1, 2, 3, 5, 8, 13, ...) grows more slowly
    than the powers of two, so this strategy sits between the incrementing
    and the exponential strategies.

    Args:
        multiplier: The delay in seconds of the first two retries
            (default: 1.0).
        max_wait: Optional maximum delay cap in seconds. If specified,
            delays will not exceed this value.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import FibonacciWait
        >>> strategy = FibonacciWait(multiplier=1.0)
        >>> [strategy.compute(Attempt.from_result(None, n, 0.0)) for n in range(1, 8)]
        [1.0, 1.0, 2.0, 3.0, 5.0, 8.0, 13.0]
        >>> # With max_wait cap
        >>> strategy = FibonacciWait(multiplier=1.0, max_wait=10.0)
        >>> strategy.compute(Attempt.from_result(None, 11, 0.0))  # fib(11) = 89, but capped
        10.0

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

    def _fibonacci(self, n: int) -> int:
        """Calculate the nth Fibonacci number (1-indexed).

        The iteration stops as soon as the scaled value reaches max_wait,
        or once the number no longer fits in a float, so large attempt
        numbers stay cheap.

        Args:
            n: The position in the Fibonacci sequence (1-indexed).

        Returns:
            The nth Fibonacci number, or the first Fibonacci number whose
            scaled value reaches max_wait or exceeds the float range.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            try:
                scaled = float(self.multiplier) * b
            except OverflowError:
                # b is beyond the float range, the delay saturates
                break
            if self.max_wait is not None and scaled >= self.max_wait:
                break
            a, b = b, a + b
        return b

    def compute(self, attempt: Attempt[Any]) -> float:
        if self.multiplier == 0:
            return 0.0
        fib_number = self._fibonacci(attempt.attempt_number)
        try:
            delay = float(self.multiplier * fib_number)
        except OverflowError:
            delay = math.inf
        if self.max_wait is not None:
            delay = min(delay, self.max_wait)
        return delay
