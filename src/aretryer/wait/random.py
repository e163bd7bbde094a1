r"""Random wait strategy."""

from __future__ import annotations

__all__ = ["RandomWait"]

import random
from typing import TYPE_CHECKING, Any

from aretryer.utils.validation import validate_non_negative
from aretryer.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class RandomWait(BaseWaitStrategy):
    """Random wait strategy.

    Returns a delay drawn uniformly in [minimum, maximum]. Joined with a
    growing strategy, it adds jitter so that many callers retrying the
    same service do not wake up at the same time.

    Args:
        minimum: The minimum delay in seconds (default: 0.0).
        maximum: The maximum delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import RandomWait
        >>> strategy = RandomWait(minimum=1.0, maximum=2.0)
        >>> 1.0 <= strategy.compute(Attempt.from_result(None, 1, 0.0)) <= 2.0
        True

        ```
    """

    def __init__(self, minimum: float = 0.0, maximum: float = 1.0) -> None:
        validate_non_negative("minimum", minimum)
        if maximum <= minimum:
            msg = f"maximum must be > minimum, got maximum={maximum} and minimum={minimum}"
            raise ValueError(msg)
        self.minimum = minimum
        self.maximum = maximum

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(minimum={self.minimum}, maximum={self.maximum})"

    def compute(self, attempt: Attempt[Any]) -> float:  # noqa: ARG002
        return random.uniform(self.minimum, self.maximum)  # noqa: S311
