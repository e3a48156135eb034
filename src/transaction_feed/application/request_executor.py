"""Request executor tracking in-flight asynchronous operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")


class RequestExecutor:
    """Runs asynchronous operations and exposes whether any is in flight.

    Overlapping runs are counted, so ``loading`` stays true until the last
    pending operation settles.
    """

    def __init__(self) -> None:
        """Initialize with nothing in flight."""
        self._in_flight = 0

    @property
    def loading(self) -> bool:
        """Whether at least one operation is pending."""
        return self._in_flight > 0

    async def run(self, operation: Callable[[], Awaitable[T]]) -> T:
        """Run an operation, keeping ``loading`` true while it is pending.

        Args:
            operation: Zero-argument callable returning an awaitable.

        Returns:
            The operation's result. Exceptions propagate unchanged.
        """
        self._in_flight += 1
        try:
            return await operation()
        finally:
            self._in_flight -= 1
