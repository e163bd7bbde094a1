r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["FixedWait"]

from typing import TYPE_CHECKING, Any

from aretryer.utils.validation import validate_non_negative
from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class FixedWait(BaseWaitStrategy):
    """Fixed wait strategy.

    Returns the same delay for every attempt, regardless of the attempt
    number.

    Args:
        delay: The delay in seconds (default: 0.0, i.e. no wait).

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import FixedWait
        >>> strategy = FixedWait(delay=1.0)
        >>> strategy.compute(Attempt.from_result(None, 1, 0.0))
        1.0
        >>> strategy.compute(Attempt.from_result(None, 10, 0.0))
        1.0

        ```
    """

    def __init__(self, delay: float = 0.0) -> None:
        validate_non_negative("delay", delay)
        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    def compute(self, attempt: Attempt[Any]) -> float:  # noqa: ARG002
        return self.delay
