r"""Abstract base class for stop strategies."""

from __future__ import annotations

__all__ = ["BaseStopStrategy", "CallableStopStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class BaseStopStrategy(ABC):
    """Abstract base class for stop strategies.

    A stop strategy decides whether the retry budget is exhausted. It is
    only consulted once the retry predicates rejected an attempt, so it
    never ends a call that produced an acceptable outcome.
    """

    @abstractmethod
    def should_stop(self, attempt: Attempt[Any]) -> bool:
        """Decide whether to stop retrying.

        Args:
            attempt: The attempt that was just rejected.

        Returns:
            ``True`` if no further attempt should be made.
        """


class CallableStopStrategy(BaseStopStrategy):
    """Stop strategy delegating to a user-supplied function.

    Args:
        func: A function taking the rejected attempt and returning
            ``True`` to stop retrying.
    """

    def __init__(self, func: Callable[[Attempt[Any]], bool]) -> None:
        self.func = func

    def should_stop(self, attempt: Attempt[Any]) -> bool:
        return bool(self.func(attempt))
