from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import Mock, patch

import pytest

from aretryer.block import BaseBlockStrategy

if TYPE_CHECKING:
    from collections.abc import Callable, Generator


class RecordingBlockStrategy(BaseBlockStrategy):
    """Block strategy recording the requested delays without sleeping."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    def block(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def recording_block() -> RecordingBlockStrategy:
    """Create a block strategy recording the delays instead of
    sleeping."""
    return RecordingBlockStrategy()


@pytest.fixture
def mock_listener() -> Mock:
    """Create a mock listener function for testing listeners."""
    return Mock()


@pytest.fixture
def flaky_operation() -> Callable[..., Mock]:
    """Create operations failing or returning a bad value on the first
    attempts.

    Example:
        >>> def test_retry(flaky_operation):
        ...     operation = flaky_operation(failures=4, result="good")
        ...     # raises RuntimeError("sorry") 4 times, then returns "good"
    """

    def factory(
        failures: int = 0,
        result: Any = "good",
        exception: Exception | None = None,
        bad_results: int = 0,
        bad_result: Any = "sorry",
    ) -> Mock:
        side_effect: list[Any] = [
            exception if exception is not None else RuntimeError("sorry")
        ] * failures
        side_effect += [bad_result] * bad_results
        side_effect.append(result)
        return Mock(side_effect=side_effect)

    return factory
