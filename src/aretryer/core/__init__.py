r"""Core configuration and shared loop logic for sync and async
retryers."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_WAIT",
    "RETRY_STATUS_CODES",
    "RetryPolicy",
]

from aretryer.core.config import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_WAIT,
    RETRY_STATUS_CODES,
    RetryPolicy,
)
