r"""Unit tests for the wait strategy base classes."""

from __future__ import annotations

from typing import Any

import pytest

from aretryer.attempt import Attempt
from aretryer.wait import BaseWaitStrategy, CallableWaitStrategy


def test_base_wait_strategy_is_abstract() -> None:
    """Test that BaseWaitStrategy cannot be instantiated."""
    with pytest.raises(TypeError):
        BaseWaitStrategy()


def test_custom_wait_strategy() -> None:
    """Test a user-defined wait strategy subclass."""

    class HalfSecondPerAttempt(BaseWaitStrategy):
        def compute(self, attempt: Attempt[Any]) -> float:
            return 0.5 * attempt.attempt_number

    assert HalfSecondPerAttempt().compute(Attempt.from_result(None, 4, 0.0)) == 2.0


def test_callable_wait_strategy() -> None:
    """Test that CallableWaitStrategy delegates to the function."""
    strategy = CallableWaitStrategy(lambda attempt: float(attempt.attempt_number))
    assert strategy.compute(Attempt.from_result(None, 3, 0.0)) == 3.0
