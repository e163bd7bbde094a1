r"""Retry listener logging every attempt."""

from __future__ import annotations

__all__ = ["LoggingRetryListener"]

import logging
from typing import TYPE_CHECKING, Any

from aretryer.listeners.base import BaseRetryListener
from aretryer.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class LoggingRetryListener(BaseRetryListener):
    """Retry listener logging every attempt with structured fields.

    Each record carries ``attempt_number``, ``delay_since_first_attempt``,
    and ``outcome`` (``"result"`` or ``"failure"``) as extra fields, plus
    ``result`` or ``failure`` with the repr of the outcome.

    Args:
        logger: The logger to use. Defaults to the ``aretryer.listeners``
            logger.
        level: The log level of attempts that returned a value.
        failure_level: The log level of attempts that raised.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.listeners import LoggingRetryListener
        >>> listener = LoggingRetryListener()
        >>> listener.on_retry(Attempt.from_result("good", 1, 0.0))

        ```
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
        failure_level: int = logging.WARNING,
    ) -> None:
        self.logger = logger if logger is not None else logging.getLogger("aretryer.listeners")
        self.level = level
        self.failure_level = failure_level

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(logger={self.logger.name!r}, "
            f"level={logging.getLevelName(self.level)})"
        )

    def on_retry(self, attempt: Attempt[Any]) -> None:
        if attempt.has_failure:
            log_structured(
                self.logger,
                self.failure_level,
                f"Attempt {attempt.attempt_number} failed after "
                f"{attempt.delay_since_first_attempt:.3f}s: {attempt.failure!r}",
                attempt_number=attempt.attempt_number,
                delay_since_first_attempt=attempt.delay_since_first_attempt,
                outcome="failure",
                failure=repr(attempt.failure),
            )
            return
        log_structured(
            self.logger,
            self.level,
            f"Attempt {attempt.attempt_number} returned after "
            f"{attempt.delay_since_first_attempt:.3f}s: {attempt.result!r}",
            attempt_number=attempt.attempt_number,
            delay_since_first_attempt=attempt.delay_since_first_attempt,
            outcome="result",
            result=repr(attempt.result),
        )
