r"""Immutable record of one execution of the retried operation."""

from __future__ import annotations

__all__ = ["Attempt"]

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from aretryer.exceptions import AttemptExecutionError, AttemptStateError

T = TypeVar("T")


@dataclass(frozen=True)
class Attempt(Generic[T]):
    """Outcome of one execution of the operation.

    An attempt holds exactly one of a result (the operation returned a
    value, possibly ``None``) or a failure (the operation raised an
    exception). Use ``Attempt.from_result`` or ``Attempt.from_failure``
    to create one.

    Attributes:
        attempt_number: The attempt number (1-indexed). The first
            execution is attempt 1.
        delay_since_first_attempt: The time in seconds between the start
            of the first execution and the completion of this one.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> attempt = Attempt.from_result("good", attempt_number=2, delay_since_first_attempt=0.5)
        >>> attempt.has_result
        True
        >>> attempt.result
        'good'
        >>> attempt = Attempt.from_failure(
        ...     RuntimeError("sorry"), attempt_number=1, delay_since_first_attempt=0.0
        ... )
        >>> attempt.has_failure
        True
        >>> attempt.failure
        RuntimeError('sorry')

        ```
    """

    attempt_number: int
    delay_since_first_attempt: float
    _value: T | None = field(default=None, repr=False)
    _failure: Exception | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.attempt_number < 1:
            msg = f"attempt_number must be >= 1, got {self.attempt_number}"
            raise ValueError(msg)
        if self.delay_since_first_attempt < 0:
            msg = f"delay_since_first_attempt must be >= 0, got {self.delay_since_first_attempt}"
            raise ValueError(msg)
        if self._failure is not None and self._value is not None:
            msg = "an attempt cannot hold both a result and a failure"
            raise ValueError(msg)

    @classmethod
    def from_result(
        cls, value: T, attempt_number: int, delay_since_first_attempt: float
    ) -> Attempt[T]:
        """Create an attempt for an execution that returned a value.

        Args:
            value: The value returned by the operation.
            attempt_number: The attempt number (1-indexed).
            delay_since_first_attempt: The delay in seconds since the
                first attempt started.

        Returns:
            The successful attempt.
        """
        return cls(
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            _value=value,
        )

    @classmethod
    def from_failure(
        cls, failure: Exception, attempt_number: int, delay_since_first_attempt: float
    ) -> Attempt[Any]:
        """Create an attempt for an execution that raised an exception.

        Args:
            failure: The exception raised by the operation.
            attempt_number: The attempt number (1-indexed).
            delay_since_first_attempt: The delay in seconds since the
                first attempt started.

        Returns:
            The failed attempt.
        """
        if failure is None:
            msg = "failure must be an exception, got None"
            raise ValueError(msg)
        return cls(
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            _failure=failure,
        )

    @property
    def has_result(self) -> bool:
        """``True`` if the operation returned a value."""
        return self._failure is None

    @property
    def has_failure(self) -> bool:
        """``True`` if the operation raised an exception."""
        return self._failure is not None

    @property
    def result(self) -> T:
        """The value returned by the operation.

        Raises:
            AttemptStateError: If the attempt holds a failure.
        """
        if self._failure is not None:
            msg = f"Attempt {self.attempt_number} has a failure, not a result"
            raise AttemptStateError(msg)
        return self._value  # type: ignore[return-value]

    @property
    def failure(self) -> Exception:
        """The exception raised by the operation.

        Raises:
            AttemptStateError: If the attempt holds a result.
        """
        if self._failure is None:
            msg = f"Attempt {self.attempt_number} has a result, not a failure"
            raise AttemptStateError(msg)
        return self._failure

    def get(self) -> T:
        """Return the result, or raise the failure as if the operation had
        just failed.

        Returns:
            The value returned by the operation.

        Raises:
            AttemptExecutionError: If the attempt holds a failure. The
                original exception is chained as the cause.

        Example:
            ```pycon
            >>> from aretryer.attempt import Attempt
            >>> Attempt.from_result(42, attempt_number=1, delay_since_first_attempt=0.0).get()
            42

            ```
        """
        if self._failure is not None:
            raise AttemptExecutionError(
                f"Attempt {self.attempt_number} failed: {self._failure!r}",
                attempt=self,
                cause=self._failure,
            ) from self._failure
        return self._value  # type: ignore[return-value]
