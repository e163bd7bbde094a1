r"""Structured logging utilities for machine-readable retry logs.

This module provides a JSON formatter, a helper to log records carrying
extra structured fields, and a call ID stored in a context variable. The
retryers set a fresh call ID for each call when none is set, so that the
log records of every attempt of one call can be grouped together by log
aggregation systems.

The structured logging system is opt-in and is enabled by configuring
Python's logging system to use the provided formatter.

Example:
    Enable structured logging for aretryer:

    ```python
    import logging
    from aretryer.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretryer")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag the attempts of a call with your own identifier:

    ```python
    from aretryer.utils.structured_logging import call_id_context

    with call_id_context("order-123"):
        retryer.call(place_order)
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "call_id_context",
    "clear_call_id",
    "get_call_id",
    "log_structured",
    "new_call_id",
    "set_call_id",
]

import contextvars
import json
import logging
import time
import uuid
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_call_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretryer_call_id", default=None
)

# Attributes of every LogRecord; anything else was passed through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_call_id() -> str | None:
    """Get the call ID of the current context.

    Returns:
        The current call ID, or None if not set.

    Example:
        ```pycon
        >>> from aretryer.utils.structured_logging import (
        ...     clear_call_id,
        ...     get_call_id,
        ...     set_call_id,
        ... )
        >>> set_call_id("call-123")
        >>> get_call_id()
        'call-123'
        >>> clear_call_id()

        ```
    """
    return _call_id.get()


def set_call_id(call_id: str) -> None:
    """Set the call ID of the current context.

    The call ID is stored in a context variable, so it is isolated
    between threads and between asyncio tasks.

    Args:
        call_id: The call ID to set.
    """
    _call_id.set(call_id)


def clear_call_id() -> None:
    """Clear the call ID of the current context.

    Example:
        ```pycon
        >>> from aretryer.utils.structured_logging import (
        ...     clear_call_id,
        ...     get_call_id,
        ...     set_call_id,
        ... )
        >>> set_call_id("call-789")
        >>> clear_call_id()
        >>> get_call_id()  # Returns None after clearing

        ```
    """
    _call_id.set(None)


def new_call_id() -> str:
    """Generate a short random call ID.

    Returns:
        A 12 character hexadecimal string.
    """
    return uuid.uuid4().hex[:12]


@contextmanager
def call_id_context(call_id: str | None = None) -> Generator[str, None, None]:
    """Context manager setting the call ID for the duration of a block.

    If ``call_id`` is None and a call ID is already set, the existing one
    is kept. Otherwise the given (or a new random) call ID is set and the
    previous value is restored on exit.

    Args:
        call_id: The call ID to use, or None.

    Yields:
        The call ID active inside the block.

    Example:
        ```pycon
        >>> from aretryer.utils.structured_logging import call_id_context, get_call_id
        >>> with call_id_context("call-42") as call_id:
        ...     get_call_id()
        ...
        'call-42'
        >>> get_call_id()  # Restored

        ```
    """
    current = _call_id.get()
    if call_id is None and current is not None:
        yield current
        return
    token = _call_id.set(call_id if call_id is not None else new_call_id())
    try:
        yield _call_id.get()  # type: ignore[misc]
    finally:
        _call_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    This formatter outputs log records as JSON objects with consistent
    field names. It includes the call ID if set, and any extra field
    added to the log record.

    Standard fields in the JSON output:
        - timestamp: ISO 8601 timestamp
        - level: Log level name
        - logger: Logger name
        - message: Log message
        - call_id: Optional call ID
        - module, function, line: Where the log originated
        - thread: Thread name

    Example:
        ```pycon
        >>> import logging
        >>> from io import StringIO
        >>> from aretryer.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("test_logger")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("Attempt failed", extra={"attempt_number": 2})
        >>> '"attempt_number": 2' in stream.getvalue()
        True

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "thread": record.threadName,
        }

        call_id = get_call_id()
        if call_id is not None:
            log_data["call_id"] = call_id

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                log_data[key] = value

        return json.dumps(log_data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002, N802
        """Format the timestamp as ISO 8601 with millisecond precision.

        Args:
            record: The log record.
            datefmt: Ignored, the format is always ISO 8601.

        Returns:
            The formatted timestamp.
        """
        return (
            time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
            + f".{int(record.msecs):03d}Z"
        )


def log_structured(
    logger: logging.Logger,
    level: int,
    message: str,
    **extra: Any,
) -> None:
    """Log a message with structured data.

    The extra fields are attached to the log record and included in the
    JSON output when using ``StructuredFormatter``.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.INFO).
        message: Log message.
        **extra: Additional structured fields to include in the log.

    Example:
        ```pycon
        >>> import logging
        >>> from aretryer.utils.structured_logging import log_structured
        >>> logger = logging.getLogger("test_structured")
        >>> log_structured(logger, logging.INFO, "Attempt succeeded", attempt_number=3)

        ```
    """
    logger.log(level, message, extra=extra)
