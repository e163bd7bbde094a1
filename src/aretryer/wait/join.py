r"""Wait strategy summing several wait strategies."""

from __future__ import annotations

__all__ = ["JoinWait"]

from typing import TYPE_CHECKING, Any

from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class JoinWait(BaseWaitStrategy):
    """Wait strategy returning the sum of the delays of its components.

    Every component computes its delay for the same attempt. This is
    used to put a fixed floor under a growing backoff, or to add jitter
    to a base strategy.

    Args:
        *strategies: The wait strategies to join. At least one is
            required.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import ExponentialWait, FixedWait, JoinWait
        >>> strategy = JoinWait(ExponentialWait(multiplier=0.25, max_wait=5.0), FixedWait(0.5))
        >>> strategy.compute(Attempt.from_result(None, 1, 0.0))
        0.75
        >>> strategy.compute(Attempt.from_result(None, 3, 0.0))
        1.5

        ```
    """

    def __init__(self, *strategies: BaseWaitStrategy) -> None:
        if not strategies:
            msg = "at least one wait strategy is required"
            raise ValueError(msg)
        for strategy in strategies:
            if not isinstance(strategy, BaseWaitStrategy):
                msg = f"expected a BaseWaitStrategy, got {type(strategy).__name__}"
                raise TypeError(msg)
        self.strategies = tuple(strategies)

    def __repr__(self) -> str:
        components = ", ".join(repr(strategy) for strategy in self.strategies)
        return f"{self.__class__.__qualname__}({components})"

    def compute(self, attempt: Attempt[Any]) -> float:
        return sum(strategy.compute(attempt) for strategy in self.strategies)
