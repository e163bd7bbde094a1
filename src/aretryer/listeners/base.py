r"""Abstract base class for retry listeners."""

from __future__ import annotations

__all__ = ["BaseRetryListener", "CallableRetryListener"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt


class BaseRetryListener(ABC):
    """Abstract base class for retry listeners.

    A listener is notified of every attempt, including the last one,
    before the retryer decides what to do with it. Listeners observe the
    retry loop and never influence it. An exception raised by a listener
    aborts the call, so listeners must not raise.
    """

    @abstractmethod
    def on_retry(self, attempt: Attempt[Any]) -> None:
        """Handle an attempt.

        Args:
            attempt: The attempt that just completed.
        """


class CallableRetryListener(BaseRetryListener):
    """Retry listener delegating to a user-supplied function.

    Args:
        func: A function taking the attempt.
    """

    def __init__(self, func: Callable[[Attempt[Any]], Any]) -> None:
        self.func = func

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{self.__class__.__qualname__}({name})"

    def on_retry(self, attempt: Attempt[Any]) -> None:
        self.func(attempt)
