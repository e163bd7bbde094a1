r"""Block strategies performing the wait between two attempts.

A block strategy receives the delay computed by the wait strategy and
blocks the calling thread for that long. Delays longer than
``threading.TIMEOUT_MAX`` (e.g. the infinite delay of an uncapped
exponential wait) are clamped to it. Raising ``InterruptedError``
from ``block`` aborts the retry loop with a ``RetryInterruptedError``.
"""

from __future__ import annotations

__all__ = ["BaseBlockStrategy", "EventBlockStrategy", "ThreadSleepBlockStrategy"]

import logging
import threading
import time
from abc import ABC, abstractmethod

logger: logging.Logger = logging.getLogger(__name__)


class BaseBlockStrategy(ABC):
    """Abstract base class for block strategies."""

    @abstractmethod
    def block(self, seconds: float) -> None:
        """Block the calling thread.

        Args:
            seconds: The time to block, in seconds. Zero means return
                immediately.

        Raises:
            InterruptedError: If the wait was interrupted.
        """


class ThreadSleepBlockStrategy(BaseBlockStrategy):
    """Block strategy sleeping with ``time.sleep``.

    Example:
        ```pycon
        >>> from aretryer.block import ThreadSleepBlockStrategy
        >>> ThreadSleepBlockStrategy().block(0.0)

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def block(self, seconds: float) -> None:
        if seconds > 0:
            time.sleep(min(seconds, threading.TIMEOUT_MAX))


class EventBlockStrategy(BaseBlockStrategy):
    """Block strategy waiting on a ``threading.Event``.

    Setting the event from another thread interrupts the current wait and
    every future wait, so the retry loops using this strategy stop with a
    ``RetryInterruptedError``.

    Args:
        event: The event signalling the cancellation.

    Example:
        ```pycon
        >>> import threading
        >>> from aretryer.block import EventBlockStrategy
        >>> cancel = threading.Event()
        >>> strategy = EventBlockStrategy(cancel)
        >>> strategy.block(0.01)
        >>> cancel.set()
        >>> strategy.block(10.0)
        Traceback (most recent call last):
            ...
        InterruptedError: Wait interrupted: cancellation requested

        ```
    """

    def __init__(self, event: threading.Event) -> None:
        self.event = event

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(is_set={self.event.is_set()})"

    def block(self, seconds: float) -> None:
        if self.event.wait(timeout=min(seconds, threading.TIMEOUT_MAX)):
            logger.debug("Cancellation requested while waiting to retry")
            msg = "Wait interrupted: cancellation requested"
            raise InterruptedError(msg)
