r"""Utility functions for the retry engine.

This package provides parameter validation for the strategies and the
structured logging helpers used by the retryers and listeners.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "call_id_context",
    "get_call_id",
    "log_structured",
    "validate_max_attempts",
    "validate_non_negative",
    "validate_positive",
]

from aretryer.utils.structured_logging import (
    StructuredFormatter,
    call_id_context,
    get_call_id,
    log_structured,
)
from aretryer.utils.validation import (
    validate_max_attempts,
    validate_non_negative,
    validate_positive,
)
