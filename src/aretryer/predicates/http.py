r"""Retry predicates for operations performing HTTP requests with httpx.

These predicates cover the transient failures of HTTP services: the
responses whose status code signals a temporary condition, and the
timeouts and network errors raised by httpx.

This module requires httpx, installed with the ``http`` extra
(``pip install aretryer[http]``). The rest of the package does not
depend on it.
"""

from __future__ import annotations

__all__ = ["StatusCodePredicate", "TransportErrorPredicate"]

import logging
from typing import TYPE_CHECKING, Any

import httpx

from aretryer.core.config import RETRY_STATUS_CODES
from aretryer.predicates.base import BaseRetryPredicate

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aretryer.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class StatusCodePredicate(BaseRetryPredicate):
    """Retry predicate matching ``httpx.Response`` results by status code.

    Results that are not ``httpx.Response`` objects and failed attempts
    are never retried by this predicate.

    Args:
        status_codes: The status codes that trigger a retry. Defaults to
            429, 500, 502, 503, and 504.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates.http import StatusCodePredicate
        >>> predicate = StatusCodePredicate()
        >>> predicate.should_retry(Attempt.from_result(httpx.Response(503), 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_result(httpx.Response(404), 1, 0.0))
        False

        ```
    """

    def __init__(self, status_codes: Iterable[int] = RETRY_STATUS_CODES) -> None:
        self.status_codes = frozenset(status_codes)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(status_codes={sorted(self.status_codes)})"

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        if not attempt.has_result or not isinstance(attempt.result, httpx.Response):
            return False
        status_code = attempt.result.status_code
        if status_code in self.status_codes:
            logger.debug(f"Attempt {attempt.attempt_number} returned retryable status {status_code}")
            return True
        return False


class TransportErrorPredicate(BaseRetryPredicate):
    """Retry predicate matching httpx timeouts and network errors.

    Example:
        ```pycon
        >>> import httpx
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.predicates.http import TransportErrorPredicate
        >>> predicate = TransportErrorPredicate()
        >>> predicate.should_retry(Attempt.from_failure(httpx.ConnectTimeout("timed out"), 1, 0.0))
        True
        >>> predicate.should_retry(Attempt.from_failure(ValueError("bad"), 1, 0.0))
        False

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_retry(self, attempt: Attempt[Any]) -> bool:
        return attempt.has_failure and isinstance(
            attempt.failure, (httpx.TimeoutException, httpx.RequestError)
        )
