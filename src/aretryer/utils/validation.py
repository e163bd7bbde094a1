r"""Parameter validation utilities for retry strategies.

This module provides the validation functions used by the stop and wait
strategies to reject structurally invalid parameters at construction
time, never at call time.
"""

from __future__ import annotations

__all__ = ["validate_max_attempts", "validate_non_negative", "validate_positive"]


def validate_non_negative(name: str, value: float) -> None:
    """Validate that a numeric parameter is >= 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If the value is negative.

    Example:
        ```pycon
        >>> from aretryer.utils.validation import validate_non_negative
        >>> validate_non_negative("delay", 1.0)
        >>> validate_non_negative("delay", -1.0)
        Traceback (most recent call last):
        ...
        ValueError: delay must be >= 0, got -1.0

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)


def validate_positive(name: str, value: float) -> None:
    """Validate that a numeric parameter is > 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to validate.

    Raises:
        ValueError: If the value is zero or negative.
    """
    if value <= 0:
        msg = f"{name} must be > 0, got {value}"
        raise ValueError(msg)


def validate_max_attempts(max_attempts: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        max_attempts: The maximum number of attempts, including the
            first one. Must be >= 1. A value of 1 disables retrying.

    Raises:
        ValueError: If ``max_attempts`` is not a positive integer.

    Example:
        ```pycon
        >>> from aretryer.utils.validation import validate_max_attempts
        >>> validate_max_attempts(3)
        >>> validate_max_attempts(0)
        Traceback (most recent call last):
        ...
        ValueError: max_attempts must be >= 1, got 0

        ```
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        msg = f"max_attempts must be an integer, got {type(max_attempts).__name__}"
        raise TypeError(msg)
    if max_attempts < 1:
        msg = f"max_attempts must be >= 1, got {max_attempts}"
        raise ValueError(msg)
