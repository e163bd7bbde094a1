r"""Unit tests for the synchronous retryer."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING
from unittest.mock import Mock, call

import pytest

from aretryer import (
    AttemptExecutionError,
    Retryer,
    RetryerBuilder,
    RetryError,
    RetryInterruptedError,
    RetryPolicy,
)
from aretryer.block import EventBlockStrategy
from aretryer.strategies import (
    exponential_wait,
    fibonacci_wait,
    fixed_wait,
    never_stop,
    stop_after_attempt,
    stop_after_delay,
)
from aretryer.utils.structured_logging import get_call_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretryer.attempt import Attempt
    from tests.conftest import RecordingBlockStrategy

###################################
#     Tests for basic retries     #
###################################


def test_retryer_success_first_attempt(mock_sleep: Mock) -> None:
    operation = Mock(return_value="good")
    retryer = RetryerBuilder().retry_if_exception().with_stop_strategy(never_stop()).build()
    assert retryer.call(operation) == "good"
    operation.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_retryer_fails_then_succeeds(
    flaky_operation: Callable[..., Mock], recording_block: RecordingBlockStrategy
) -> None:
    """Test that an operation failing 4 times then succeeding is called 5
    times."""
    operation = flaky_operation(failures=4, result="good")
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(never_stop())
        .with_block_strategy(recording_block)
        .build()
    )
    assert retryer.call(operation) == "good"
    assert operation.call_count == 5
    assert recording_block.delays == [0.0, 0.0, 0.0, 0.0]


def test_retryer_bad_results_then_good(
    flaky_operation: Callable[..., Mock], recording_block: RecordingBlockStrategy
) -> None:
    """Test that rejected results are retried until an accepted one."""
    operation = flaky_operation(bad_results=4, bad_result="sorry", result="good")
    retryer = (
        RetryerBuilder()
        .retry_if_result(lambda result: "good" not in result)
        .with_stop_strategy(never_stop())
        .with_block_strategy(recording_block)
        .build()
    )
    assert retryer.call(operation) == "good"
    assert operation.call_count == 5


def test_retryer_always_fails(recording_block: RecordingBlockStrategy) -> None:
    """Test that the stop strategy halts the loop with RetryError."""
    exc = RuntimeError("sorry")
    operation = Mock(side_effect=exc)
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_attempt(3))
        .with_wait_strategy(fixed_wait(1.0))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(RetryError, match=r"after 3 attempts") as exc_info:
        retryer.call(operation)

    assert operation.call_count == 3
    assert recording_block.delays == [1.0, 1.0]
    assert exc_info.value.attempt_number == 3
    assert exc_info.value.last_attempt.attempt_number == 3
    assert exc_info.value.last_attempt.failure is exc
    assert exc_info.value.__cause__ is exc


def test_retryer_always_fails_thread_sleep(mock_sleep: Mock) -> None:
    """Test that the default block strategy sleeps between attempts."""
    operation = Mock(side_effect=RuntimeError("sorry"))
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_attempt(3))
        .with_wait_strategy(fixed_wait(1.0))
        .build()
    )
    with pytest.raises(RetryError):
        retryer.call(operation)

    assert operation.call_count == 3
    assert mock_sleep.call_args_list == [call(1.0), call(1.0)]


def test_retryer_fibonacci_wait_many_attempts(
    flaky_operation: Callable[..., Mock], recording_block: RecordingBlockStrategy
) -> None:
    """Test that a long retry sequence with a Fibonacci wait does not
    overflow."""
    operation = flaky_operation(failures=1500, result="good")
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(never_stop())
        .with_wait_strategy(fibonacci_wait(0.0, 1.0))
        .with_block_strategy(recording_block)
        .build()
    )
    assert retryer.call(operation) == "good"
    assert operation.call_count == 1501
    assert set(recording_block.delays) == {0.0}


def test_retryer_always_bad_result(recording_block: RecordingBlockStrategy) -> None:
    """Test that RetryError carries the last rejected result."""
    operation = Mock(return_value="sorry")
    retryer = (
        RetryerBuilder()
        .retry_if_result(lambda result: result == "sorry")
        .with_stop_strategy(stop_after_attempt(2))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(RetryError) as exc_info:
        retryer.call(operation)
    assert exc_info.value.last_attempt.result == "sorry"
    assert exc_info.value.__cause__ is None


@pytest.mark.parametrize("max_attempts", [1, 2, 5, 10])
def test_retryer_stop_after_attempt_calls(
    max_attempts: int, recording_block: RecordingBlockStrategy
) -> None:
    """Test that an always rejected operation runs exactly max_attempts
    times."""
    operation = Mock(side_effect=ValueError("bad"))
    retryer = (
        RetryerBuilder()
        .retry_if_exception_type(ValueError)
        .with_stop_strategy(stop_after_attempt(max_attempts))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(RetryError):
        retryer.call(operation)
    assert operation.call_count == max_attempts
    assert len(recording_block.delays) == max_attempts - 1


def test_retryer_exponential_wait_delays(recording_block: RecordingBlockStrategy) -> None:
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_attempt(6))
        .with_wait_strategy(exponential_wait(1.0, 10.0))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(RetryError):
        retryer.call(Mock(side_effect=RuntimeError("sorry")))
    assert recording_block.delays == [1.0, 2.0, 4.0, 8.0, 10.0]


def test_retryer_stop_after_delay(recording_block: RecordingBlockStrategy) -> None:
    """Test that a zero time budget stops after the first rejection."""
    operation = Mock(side_effect=RuntimeError("sorry"))
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_delay(0.0))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(RetryError):
        retryer.call(operation)
    operation.assert_called_once_with()


###################################
#     Tests for accepted cases    #
###################################


def test_retryer_without_predicates_single_attempt(recording_block: RecordingBlockStrategy) -> None:
    """Test that a retryer without predicates never retries."""
    operation = Mock(return_value="sorry")
    retryer = (
        RetryerBuilder()
        .with_stop_strategy(never_stop())
        .with_block_strategy(recording_block)
        .build()
    )
    assert retryer.call(operation) == "sorry"
    operation.assert_called_once_with()
    assert recording_block.delays == []


def test_retryer_accepted_failure() -> None:
    """Test that an accepted failure raises AttemptExecutionError chained
    to the original exception."""
    exc = ValueError("bad")
    operation = Mock(side_effect=exc)
    retryer = (
        RetryerBuilder().retry_if_exception_type(ConnectionError).with_stop_strategy(never_stop()).build()
    )
    with pytest.raises(AttemptExecutionError) as exc_info:
        retryer.call(operation)
    operation.assert_called_once_with()
    assert exc_info.value.__cause__ is exc
    assert exc_info.value.attempt.attempt_number == 1


def test_retryer_failure_not_matched_by_result_predicate() -> None:
    """Test that result predicates never retry failures."""
    operation = Mock(side_effect=RuntimeError("sorry"))
    retryer = (
        RetryerBuilder().retry_if_result(lambda result: True).with_stop_strategy(never_stop()).build()
    )
    with pytest.raises(AttemptExecutionError):
        retryer.call(operation)
    operation.assert_called_once_with()


def test_retryer_none_result() -> None:
    retryer = RetryerBuilder().retry_if_exception().build()
    assert retryer.call(Mock(return_value=None)) is None


def test_retryer_base_exception_propagates() -> None:
    """Test that exceptions that are not Exception subclasses are not
    captured."""
    operation = Mock(side_effect=KeyboardInterrupt)
    retryer = RetryerBuilder().retry_if_exception().with_stop_strategy(never_stop()).build()
    with pytest.raises(KeyboardInterrupt):
        retryer.call(operation)
    operation.assert_called_once_with()


###############################
#     Tests for listeners     #
###############################


def test_retryer_listeners_order(
    flaky_operation: Callable[..., Mock], recording_block: RecordingBlockStrategy
) -> None:
    """Test that listeners are notified in order for every attempt,
    including the last one."""
    calls = []
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(never_stop())
        .with_block_strategy(recording_block)
        .with_retry_listener(lambda attempt: calls.append(("A", attempt.attempt_number)))
        .with_retry_listener(lambda attempt: calls.append(("B", attempt.attempt_number)))
        .build()
    )
    assert retryer.call(flaky_operation(failures=2)) == "good"
    assert calls == [("A", 1), ("B", 1), ("A", 2), ("B", 2), ("A", 3), ("B", 3)]


def test_retryer_listener_receives_attempts(recording_block: RecordingBlockStrategy) -> None:
    attempts: list[Attempt] = []
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_attempt(2))
        .with_block_strategy(recording_block)
        .with_retry_listener(attempts.append)
        .build()
    )
    with pytest.raises(RetryError):
        retryer.call(Mock(side_effect=RuntimeError("sorry")))
    assert [attempt.attempt_number for attempt in attempts] == [1, 2]
    assert all(attempt.has_failure for attempt in attempts)
    assert attempts[0].delay_since_first_attempt <= attempts[1].delay_since_first_attempt


def test_retryer_listener_exception_propagates() -> None:
    """Test that an exception raised by a listener aborts the call."""
    operation = Mock(return_value="good")
    retryer = (
        RetryerBuilder().with_retry_listener(Mock(side_effect=RuntimeError("listener error"))).build()
    )
    with pytest.raises(RuntimeError, match=r"listener error"):
        retryer.call(operation)
    operation.assert_called_once_with()


##################################
#     Tests for interruption     #
##################################


def test_retryer_interrupted() -> None:
    """Test that an interrupted wait raises RetryInterruptedError with the
    last attempt."""
    event = threading.Event()
    event.set()
    operation = Mock(side_effect=RuntimeError("sorry"))
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(never_stop())
        .with_wait_strategy(fixed_wait(60.0))
        .with_block_strategy(EventBlockStrategy(event))
        .build()
    )
    with pytest.raises(RetryInterruptedError) as exc_info:
        retryer.call(operation)
    operation.assert_called_once_with()
    assert exc_info.value.last_attempt.attempt_number == 1
    assert isinstance(exc_info.value.__cause__, InterruptedError)


#####################################
#     Tests for strategy errors     #
#####################################


def test_retryer_predicate_exception_propagates() -> None:
    retryer = RetryerBuilder().retry_if_result(Mock(side_effect=ValueError("predicate"))).build()
    with pytest.raises(ValueError, match=r"predicate"):
        retryer.call(Mock(return_value="good"))


def test_retryer_wait_exception_propagates(recording_block: RecordingBlockStrategy) -> None:
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(never_stop())
        .with_wait_strategy(Mock(side_effect=ArithmeticError("wait")))
        .with_block_strategy(recording_block)
        .build()
    )
    with pytest.raises(ArithmeticError, match=r"wait"):
        retryer.call(Mock(side_effect=RuntimeError("sorry")))
    assert recording_block.delays == []


###########################
#     Tests for reuse     #
###########################


def test_retryer_default_policy() -> None:
    retryer = Retryer()
    assert isinstance(retryer.policy, RetryPolicy)
    assert retryer.call(Mock(return_value=42)) == 42


def test_retryer_reusable(recording_block: RecordingBlockStrategy) -> None:
    """Test that the loop state is reset between two calls."""
    retryer = (
        RetryerBuilder()
        .retry_if_exception()
        .with_stop_strategy(stop_after_attempt(3))
        .with_block_strategy(recording_block)
        .build()
    )
    first = Mock(side_effect=[RuntimeError("sorry"), RuntimeError("sorry"), "good"])
    second = Mock(side_effect=[RuntimeError("sorry"), RuntimeError("sorry"), "good"])
    assert retryer.call(first) == "good"
    assert retryer.call(second) == "good"


def test_retryer_concurrent_calls() -> None:
    """Test that one retryer can run several calls on different threads."""
    retryer = (
        RetryerBuilder()
        .retry_if_result(lambda result: result == "sorry")
        .with_stop_strategy(stop_after_attempt(3))
        .build()
    )
    results = []

    def worker() -> None:
        operation = Mock(side_effect=["sorry", "sorry", "good"])
        results.append(retryer.call(operation))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    assert results == ["good"] * 8


def test_retryer_sets_call_id() -> None:
    """Test that the operation runs with a call ID that is cleared after
    the call."""
    seen = []
    retryer = (
        RetryerBuilder()
        .retry_if_result(lambda result: len(seen) < 2)
        .with_stop_strategy(never_stop())
        .build()
    )
    retryer.call(lambda: seen.append(get_call_id()))
    assert len(seen) == 2
    assert seen[0] is not None
    assert seen[0] == seen[1]
    assert get_call_id() is None


##########################
#     Tests for wrap     #
##########################


def test_retryer_wrap(recording_block: RecordingBlockStrategy) -> None:
    operation = Mock(side_effect=[ConnectionError(), 3])
    retryer = (
        RetryerBuilder()
        .retry_if_exception_type(ConnectionError)
        .with_stop_strategy(stop_after_attempt(2))
        .with_block_strategy(recording_block)
        .build()
    )

    @retryer.wrap
    def add(a: int, b: int) -> int:
        return operation(a, b)

    assert add(1, b=2) == 3
    assert operation.call_count == 2
    operation.assert_called_with(1, 2)
    assert add.__name__ == "add"
