r"""Wait strategies computing the delay between two attempts.

This package provides fixed, incrementing, exponential, Fibonacci,
random, and exception-driven wait strategies, and a strategy joining
several of them.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "CallableWaitStrategy",
    "ExceptionWait",
    "ExponentialWait",
    "FibonacciWait",
    "FixedWait",
    "IncrementingWait",
    "JoinWait",
    "RandomWait",
]

from aretryer.wait.base import BaseWaitStrategy, CallableWaitStrategy
from aretryer.wait.exception import ExceptionWait
from aretryer.wait.exponential import ExponentialWait
from aretryer.wait.fibonacci import FibonacciWait
from aretryer.wait.fixed import FixedWait
from aretryer.wait.incrementing import IncrementingWait
from aretryer.wait.join import JoinWait
from aretryer.wait.random import RandomWait
