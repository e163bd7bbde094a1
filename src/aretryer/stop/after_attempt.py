r"""Stop strategy bounding the number of attempts."""

from __future__ import annotations

__all__ = ["StopAfterAttempt"]

from typing import TYPE_CHECKING, Any

from aretryer.stop.base import BaseStopStrategy
from aretryer.utils.validation import validate_max_attempts

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class StopAfterAttempt(BaseStopStrategy):
    """Stop strategy that stops after a given number of attempts.

    Args:
        max_attempts: The maximum number of attempts, including the first
            one. Must be >= 1. With ``max_attempts=1`` the operation is
            executed once and never retried.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.stop import StopAfterAttempt
        >>> strategy = StopAfterAttempt(3)
        >>> strategy.should_stop(Attempt.from_result(None, 2, 0.0))
        False
        >>> strategy.should_stop(Attempt.from_result(None, 3, 0.0))
        True

        ```
    """

    def __init__(self, max_attempts: int) -> None:
        validate_max_attempts(max_attempts)
        self.max_attempts = max_attempts

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempts={self.max_attempts})"

    def should_stop(self, attempt: Attempt[Any]) -> bool:
        return attempt.attempt_number >= self.max_attempts
