r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy", "CallableWaitStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to wait before the next attempt,
    based on the attempt that was just rejected. Implementations must be
    pure functions of the attempt: a strategy instance is shared by every
    call made with the same retryer, possibly concurrently.
    """

    @abstractmethod
    def compute(self, attempt: Attempt[Any]) -> float:
        """Compute the delay before the next attempt.

        Args:
            attempt: The attempt that was just rejected. Its
                ``attempt_number`` is 1 after the first execution.

        Returns:
            The delay in seconds. A zero delay means the next attempt
            starts immediately.
        """


class CallableWaitStrategy(BaseWaitStrategy):
    """Wait strategy delegating to a user-supplied function.

    Args:
        func: A function taking the rejected attempt and returning the
            delay in seconds.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.wait import CallableWaitStrategy
        >>> strategy = CallableWaitStrategy(lambda attempt: 0.5 * attempt.attempt_number)
        >>> strategy.compute(Attempt.from_result(None, 3, 0.0))
        1.5

        ```
    """

    def __init__(self, func: Callable[[Attempt[Any]], float]) -> None:
        self.func = func

    def compute(self, attempt: Attempt[Any]) -> float:
        return self.func(attempt)
