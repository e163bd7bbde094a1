r"""Unit tests for StopAfterAttempt strategy."""

from __future__ import annotations

import pytest

from aretryer.attempt import Attempt
from aretryer.stop import StopAfterAttempt


@pytest.mark.parametrize("max_attempts", [1, 2, 3, 10])
def test_stop_after_attempt_threshold(max_attempts: int) -> None:
    """Test that the strategy fires once attempt_number >= max_attempts."""
    strategy = StopAfterAttempt(max_attempts)
    for attempt_number in range(1, max_attempts):
        assert not strategy.should_stop(Attempt.from_result(None, attempt_number, 0.0))
    assert strategy.should_stop(Attempt.from_result(None, max_attempts, 0.0))
    assert strategy.should_stop(Attempt.from_result(None, max_attempts + 1, 0.0))


def test_stop_after_one_attempt() -> None:
    """Test that max_attempts=1 stops after the first attempt."""
    strategy = StopAfterAttempt(1)
    assert strategy.should_stop(Attempt.from_failure(RuntimeError("sorry"), 1, 0.0))


@pytest.mark.parametrize("max_attempts", [0, -1])
def test_stop_after_attempt_invalid(max_attempts: int) -> None:
    """Test that max_attempts < 1 raises ValueError."""
    with pytest.raises(ValueError, match=r"max_attempts must be >= 1"):
        StopAfterAttempt(max_attempts)


@pytest.mark.parametrize("max_attempts", [1.5, "3", True])
def test_stop_after_attempt_invalid_type(max_attempts: object) -> None:
    """Test that a non-integer max_attempts raises TypeError."""
    with pytest.raises(TypeError, match=r"max_attempts must be an integer"):
        StopAfterAttempt(max_attempts)


def test_stop_after_attempt_repr() -> None:
    assert repr(StopAfterAttempt(3)) == "StopAfterAttempt(max_attempts=3)"
