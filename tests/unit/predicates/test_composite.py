r"""Unit tests for AnyPredicate."""

from __future__ import annotations

from unittest.mock import Mock

from aretryer.attempt import Attempt
from aretryer.predicates import (
    AnyPredicate,
    CallablePredicate,
    ExceptionTypePredicate,
    ResultPredicate,
)


def test_any_predicate_empty_never_retries() -> None:
    """Test that no predicate means no retry, whatever the outcome."""
    predicate = AnyPredicate([])
    assert len(predicate) == 0
    assert not predicate.should_retry(Attempt.from_result("sorry", 1, 0.0))
    assert not predicate.should_retry(Attempt.from_failure(RuntimeError("sorry"), 1, 0.0))


def test_any_predicate_or() -> None:
    """Test that any rejecting predicate triggers a retry."""
    predicate = AnyPredicate(
        [ResultPredicate(lambda result: result == "sorry"), ExceptionTypePredicate(OSError)]
    )
    assert predicate.should_retry(Attempt.from_result("sorry", 1, 0.0))
    assert predicate.should_retry(Attempt.from_failure(OSError(), 1, 0.0))
    assert not predicate.should_retry(Attempt.from_result("good", 1, 0.0))
    assert not predicate.should_retry(Attempt.from_failure(ValueError(), 1, 0.0))


def test_any_predicate_short_circuits() -> None:
    """Test that evaluation stops at the first rejecting predicate."""
    second = Mock(return_value=False)
    predicate = AnyPredicate(
        [CallablePredicate(lambda attempt: True), CallablePredicate(second)]
    )
    assert predicate.should_retry(Attempt.from_result(None, 1, 0.0))
    second.assert_not_called()
