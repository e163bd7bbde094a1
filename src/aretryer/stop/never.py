r"""Stop strategy that never stops."""

from __future__ import annotations

__all__ = ["NeverStop"]

from typing import TYPE_CHECKING, Any

from aretryer.stop.base import BaseStopStrategy

if TYPE_CHECKING:
    from aretryer.attempt import Attempt


class NeverStop(BaseStopStrategy):
    """Stop strategy that never stops.

    The operation is retried until the retry predicates accept an
    attempt.

    Example:
        ```pycon
        >>> from aretryer.attempt import Attempt
        >>> from aretryer.stop import NeverStop
        >>> NeverStop().should_stop(Attempt.from_result(None, 1000, 0.0))
        False

        ```
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"

    def should_stop(self, attempt: Attempt[Any]) -> bool:  # noqa: ARG002
        return False
