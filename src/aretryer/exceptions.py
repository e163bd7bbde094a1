r"""Exceptions raised by the retry engine.

The engine distinguishes between the failure of the wrapped operation
(``AttemptExecutionError``), the exhaustion of the retry budget
(``RetryError``), and the interruption of the wait between two attempts
(``RetryInterruptedError``). All of them derive from ``RetryerError`` so
callers can catch every engine failure at once.
"""

from __future__ import annotations

__all__ = [
    "AttemptExecutionError",
    "AttemptStateError",
    "RetryError",
    "RetryInterruptedError",
    "RetryerError",
]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class RetryerError(Exception):
    """Base class of all the exceptions raised by the retry engine."""


class AttemptStateError(RetryerError):
    """Raised when reading the result of a failed attempt, or the failure
    of a successful attempt.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> attempt = Attempt.from_result("good", attempt_number=1, delay_since_first_attempt=0.0)
        >>> attempt.failure
        Traceback (most recent call last):
            ...
        aretryer.exceptions.AttemptStateError: Attempt 1 has a result, not a failure

        ```
    """


class AttemptExecutionError(RetryerError):
    """Raised when the operation failed and the failure was accepted.

    The original exception is available as ``__cause__`` and through the
    ``attempt`` attribute.

    Args:
        message: A descriptive error message.
        attempt: The attempt holding the failure.
        cause: The exception raised by the operation.
    """

    def __init__(self, message: str, attempt: Attempt[Any], cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.attempt = attempt
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class RetryError(RetryerError):
    """Raised when the stop strategy halted the retry loop.

    Args:
        attempt_number: The number of attempts made.
        last_attempt: The last attempt, holding either the last rejected
            result or the last failure.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.exceptions import RetryError
        >>> attempt = Attempt.from_result("sorry", attempt_number=3, delay_since_first_attempt=2.0)
        >>> raise RetryError(3, attempt)
        Traceback (most recent call last):
            ...
        aretryer.exceptions.RetryError: Retrying failed to complete successfully after 3 attempts.

        ```
    """

    def __init__(self, attempt_number: int, last_attempt: Attempt[Any]) -> None:
        super().__init__(
            f"Retrying failed to complete successfully after {attempt_number} attempts."
        )
        self.attempt_number = attempt_number
        self.last_attempt = last_attempt
        if last_attempt.has_failure:
            self.__cause__ = last_attempt.failure


class RetryInterruptedError(RetryerError):
    """Raised when the wait between two attempts was interrupted.

    Args:
        last_attempt: The attempt made just before the interrupted wait.
        cause: The interruption signal.
    """

    def __init__(self, last_attempt: Attempt[Any], cause: BaseException | None = None) -> None:
        super().__init__(
            f"Interrupted while waiting to retry after attempt {last_attempt.attempt_number}"
        )
        self.last_attempt = last_attempt
        if cause is not None:
            self.__cause__ = cause
