"""Protocol for the request cache."""

from collections.abc import Iterable
from typing import Protocol


class RequestCacheProtocol(Protocol):
    """Key-value store of serialized responses keyed by endpoint and params."""

    def get(self, key: str) -> str | None:
        """Get the serialized value stored under a key.

        Args:
            key: The cache key.

        Returns:
            The serialized value, or None if the key is absent.
        """
        ...

    def set(self, key: str, value: str) -> None:
        """Store a serialized value under a key.

        Args:
            key: The cache key.
            value: The serialized value.
        """
        ...

    def delete(self, key: str) -> None:
        """Remove a single key if present."""
        ...

    def clear(self) -> None:
        """Remove every entry."""
        ...

    def clear_matching_prefixes(self, prefixes: Iterable[str]) -> int:
        """Remove every entry whose key starts with one of the prefixes.

        Args:
            prefixes: Endpoint identifiers to invalidate.

        Returns:
            Number of removed entries.
        """
        ...
