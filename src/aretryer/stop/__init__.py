r"""Stop strategies deciding when the retry budget is exhausted."""

from __future__ import annotations

__all__ = [
    "BaseStopStrategy",
    "CallableStopStrategy",
    "NeverStop",
    "StopAfterAttempt",
    "StopAfterDelay",
]

from aretryer.stop.after_attempt import StopAfterAttempt
from aretryer.stop.after_delay import StopAfterDelay
from aretryer.stop.base import BaseStopStrategy, CallableStopStrategy
from aretryer.stop.never import NeverStop
