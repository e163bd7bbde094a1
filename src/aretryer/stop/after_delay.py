r"""Stop strategy bounding the time spent retrying."""

from __future__ import annotations

__all__ = ["StopAfterDelay"]

from typing import TYPE_CHECKING, Any

from aretryer.stop.base import BaseStopStrategy
from aretryer.utils.validation import validate_non_negative

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class StopAfterDelay(BaseStopStrategy):
    """Stop strategy that stops once a given delay has elapsed since the
    first attempt started.

    The running attempt is never interrupted: the budget is checked
    against ``delay_since_first_attempt`` of the rejected attempt.

    Args:
        max_delay: The time budget in seconds. Must be >= 0.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.stop import StopAfterDelay
        >>> strategy = StopAfterDelay(10.0)
        >>> strategy.should_stop(Attempt.from_result(None, 4, 9.5))
        False
        >>> strategy.should_stop(Attempt.from_result(None, 5, 10.0))
        True

        ```
    """

    def __init__(self, max_delay: float) -> None:
        validate_non_negative("max_delay", max_delay)
        self.max_delay = max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_delay={self.max_delay})"

    def should_stop(self, attempt: Attempt[Any]) -> bool:
        return attempt.delay_since_first_attempt >= self.max_delay
