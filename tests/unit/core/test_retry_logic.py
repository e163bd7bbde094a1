r"""Unit tests for the shared retry loop logic."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from aretryer.attempt import Attempt
from aretryer.core import RetryPolicy
from aretryer.core.retry_logic import (
    compute_wait,
    make_attempt,
    resolve_accepted,
    should_retry,
    should_stop,
)
from aretryer.exceptions import AttemptExecutionError
from aretryer.predicates import ExceptionTypePredicate, ResultPredicate
from aretryer.stop import NeverStop, StopAfterAttempt
from aretryer.wait import CallableWaitStrategy, FixedWait

##################################
#     Tests for make_attempt     #
##################################


def test_make_attempt_result() -> None:
    with patch("aretryer.core.retry_logic.time.monotonic", return_value=12.5):
        attempt = make_attempt(2, start_time=10.0, result="good")
    assert attempt.attempt_number == 2
    assert attempt.delay_since_first_attempt == 2.5
    assert attempt.result == "good"


def test_make_attempt_none_result() -> None:
    attempt = make_attempt(1, start_time=0.0)
    assert attempt.has_result
    assert attempt.result is None


def test_make_attempt_failure() -> None:
    exc = RuntimeError("sorry")
    with patch("aretryer.core.retry_logic.time.monotonic", return_value=3.0):
        attempt = make_attempt(4, start_time=1.0, failure=exc)
    assert attempt.has_failure
    assert attempt.failure is exc
    assert attempt.delay_since_first_attempt == 2.0


def test_make_attempt_clamps_negative_delay() -> None:
    with patch("aretryer.core.retry_logic.time.monotonic", return_value=1.0):
        attempt = make_attempt(1, start_time=2.0, result="good")
    assert attempt.delay_since_first_attempt == 0.0


##################################
#     Tests for should_retry     #
##################################


def test_should_retry_without_predicates() -> None:
    """Test that an empty predicate list never retries."""
    policy = RetryPolicy()
    assert not should_retry(policy, Attempt.from_result("sorry", 1, 0.0))
    assert not should_retry(policy, Attempt.from_failure(RuntimeError(), 1, 0.0))


def test_should_retry_any_predicate() -> None:
    policy = RetryPolicy(
        predicates=[ResultPredicate(lambda result: result == "sorry"), ExceptionTypePredicate()]
    )
    assert should_retry(policy, Attempt.from_result("sorry", 1, 0.0))
    assert should_retry(policy, Attempt.from_failure(RuntimeError(), 1, 0.0))
    assert not should_retry(policy, Attempt.from_result("good", 1, 0.0))


#################################
#     Tests for should_stop     #
#################################


def test_should_stop() -> None:
    policy = RetryPolicy(stop_strategy=StopAfterAttempt(3))
    assert not should_stop(policy, Attempt.from_result("sorry", 2, 0.0))
    assert should_stop(policy, Attempt.from_result("sorry", 3, 0.0))


def test_should_stop_never() -> None:
    policy = RetryPolicy(stop_strategy=NeverStop())
    assert not should_stop(policy, Attempt.from_result("sorry", 1000, 1e6))


##################################
#     Tests for compute_wait     #
##################################


def test_compute_wait() -> None:
    policy = RetryPolicy(wait_strategy=FixedWait(1.5))
    assert compute_wait(policy, Attempt.from_result("sorry", 1, 0.0)) == 1.5


def test_compute_wait_clamps_negative(caplog: pytest.LogCaptureFixture) -> None:
    """Test that negative delays of custom strategies are clamped to 0."""
    policy = RetryPolicy(wait_strategy=CallableWaitStrategy(lambda attempt: -2.0))
    with caplog.at_level(logging.WARNING):
        assert compute_wait(policy, Attempt.from_result("sorry", 3, 0.0)) == 0.0
    assert "returned a negative delay (-2.0) for attempt 3" in caplog.text


######################################
#     Tests for resolve_accepted     #
######################################


def test_resolve_accepted_result() -> None:
    assert resolve_accepted(Attempt.from_result("good", 1, 0.0)) == "good"


def test_resolve_accepted_failure() -> None:
    """Test that an accepted failure raises AttemptExecutionError chained
    to the failure."""
    exc = ValueError("bad")
    attempt = Attempt.from_failure(exc, 2, 0.0)
    with pytest.raises(AttemptExecutionError, match=r"Operation failed on attempt 2") as exc_info:
        resolve_accepted(attempt)
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.cause is exc
    assert exc_info.value.attempt is attempt
