r"""Listener manager notifying the listeners of a retry policy."""

from __future__ import annotations

__all__ = ["ListenerManager"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretryer.attempt import Attempt
    from aretryer.listeners.base import BaseRetryListener


class ListenerManager:
    """Notifies listeners of the attempts of a retry loop.

    Listeners are notified sequentially on the calling thread, in
    registration order: a listener returns before the next one is
    called. Exceptions raised by a listener are not caught.

    Attributes:
        listeners: The listeners, in notification order.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.listeners import CallableRetryListener, ListenerManager
        >>> seen = []
        >>> manager = ListenerManager(
        ...     [
        ...         CallableRetryListener(lambda a: seen.append(("A", a.attempt_number))),
        ...         CallableRetryListener(lambda a: seen.append(("B", a.attempt_number))),
        ...     ]
        ... )
        >>> manager.notify(Attempt.from_result("sorry", 1, 0.0))
        >>> seen
        [('A', 1), ('B', 1)]

        ```
    """

    def __init__(self, listeners: Iterable[BaseRetryListener]) -> None:
        self.listeners = tuple(listeners)

    def __len__(self) -> int:
        return len(self.listeners)

    def notify(self, attempt: Attempt[Any]) -> None:
        """Notify every listener of an attempt.

        Args:
            attempt: The attempt that just completed.
        """
        for listener in self.listeners:
            listener.on_retry(attempt)
