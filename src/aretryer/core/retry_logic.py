r"""Shared retry loop logic for sync and async retryers.

This module contains the steps of the retry loop that do not depend on
how the operation is executed or how the wait is performed: building
attempts, evaluating the policy, and resolving the final outcome.
"""

from __future__ import annotations

__all__ = [
    "compute_wait",
    "make_attempt",
    "resolve_accepted",
    "should_retry",
    "should_stop",
]

import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretryer.attempt import Attempt
from aretryer.exceptions import AttemptExecutionError

if TYPE_CHECKING:
    from aretryer.core.config import RetryPolicy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def make_attempt(
    attempt_number: int,
    start_time: float,
    result: Any = None,
    failure: Exception | None = None,
) -> Attempt[Any]:
    """Build the attempt of an execution that just completed.

    The delay since the first attempt is measured from the start of the
    first execution to the completion of this one.

    Args:
        attempt_number: The attempt number (1-indexed).
        start_time: The ``time.monotonic`` value when the first attempt
            started.
        result: The value returned by the operation, if it returned.
        failure: The exception raised by the operation, if it raised.

    Returns:
        The attempt.
    """
    delay = max(time.monotonic() - start_time, 0.0)
    if failure is not None:
        return Attempt.from_failure(failure, attempt_number, delay)
    return Attempt.from_result(result, attempt_number, delay)


def should_retry(policy: RetryPolicy, attempt: Attempt[Any]) -> bool:
    """Decide whether the attempt is rejected by any retry predicate.

    Args:
        policy: The retry policy.
        attempt: The attempt to evaluate.

    Returns:
        ``True`` if at least one predicate requests a retry. Always
        ``False`` when the policy has no predicate.
    """
    return any(predicate.should_retry(attempt) for predicate in policy.predicates)


def should_stop(policy: RetryPolicy, attempt: Attempt[Any]) -> bool:
    """Decide whether the retry budget is exhausted.

    Args:
        policy: The retry policy.
        attempt: The rejected attempt.

    Returns:
        ``True`` if the stop strategy fired.
    """
    return policy.stop_strategy.should_stop(attempt)


def compute_wait(policy: RetryPolicy, attempt: Attempt[Any]) -> float:
    """Compute the delay before the next attempt.

    Negative delays returned by custom wait strategies are clamped to
    zero.

    Args:
        policy: The retry policy.
        attempt: The rejected attempt.

    Returns:
        The delay in seconds, >= 0.
    """
    delay = policy.wait_strategy.compute(attempt)
    if delay < 0:
        logger.warning(
            f"{policy.wait_strategy!r} returned a negative delay ({delay}) "
            f"for attempt {attempt.attempt_number}, using 0"
        )
        return 0.0
    return delay


def resolve_accepted(attempt: Attempt[T]) -> T:
    """Return the outcome of an accepted attempt.

    Args:
        attempt: The accepted attempt.

    Returns:
        The result of the attempt.

    Raises:
        AttemptExecutionError: If the accepted attempt holds a failure.
            The original exception is chained as the cause.
    """
    if attempt.has_failure:
        logger.debug(
            f"Attempt {attempt.attempt_number} failed and the failure was accepted: "
            f"{attempt.failure!r}"
        )
        raise AttemptExecutionError(
            f"Operation failed on attempt {attempt.attempt_number}: {attempt.failure!r}",
            attempt=attempt,
            cause=attempt.failure,
        ) from attempt.failure
    return attempt.result
