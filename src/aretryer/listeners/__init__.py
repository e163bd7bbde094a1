r"""Retry listeners observing the attempts of a retry loop."""

from __future__ import annotations

__all__ = [
    "BaseRetryListener",
    "CallableRetryListener",
    "ListenerManager",
    "LoggingRetryListener",
]

from aretryer.listeners.base import BaseRetryListener, CallableRetryListener
from aretryer.listeners.logging_listener import LoggingRetryListener
from aretryer.listeners.manager import ListenerManager
