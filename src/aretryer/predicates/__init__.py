r"""Retry predicates deciding whether an attempt should be retried.

The HTTP predicates live in ``aretryer.predicates.http``.
"""

from __future__ import annotations

__all__ = [
    "AnyPredicate",
    "BaseRetryPredicate",
    "CallablePredicate",
    "ExceptionPredicate",
    "ExceptionTypePredicate",
    "ResultPredicate",
]

from aretryer.predicates.base import BaseRetryPredicate, CallablePredicate
from aretryer.predicates.composite import AnyPredicate
from aretryer.predicates.exception import ExceptionPredicate, ExceptionTypePredicate
from aretryer.predicates.result import ResultPredicate
