"""In-memory request cache implementation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from transaction_feed.domain.contracts.request_cache import RequestCacheProtocol

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


class InMemoryRequestCache(RequestCacheProtocol):
    """Serialized responses by cache key, kept for the lifetime of the session.

    Entries never expire on their own. They are removed only through
    ``delete``, ``clear`` or ``clear_matching_prefixes``.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self._entries: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        """Get the serialized value stored under a key.

        Args:
            key: The cache key.

        Returns:
            The serialized value, or None if the key is absent.
        """
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """Store a serialized value under a key.

        Args:
            key: The cache key.
            value: The serialized value.
        """
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove a single key if present."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove every entry."""
        logger.debug(f"Clearing request cache ({len(self._entries)} entries)")
        self._entries = {}

    def clear_matching_prefixes(self, prefixes: Iterable[str]) -> int:
        """Remove every entry whose key starts with one of the prefixes.

        Args:
            prefixes: Endpoint identifiers to invalidate.

        Returns:
            Number of removed entries.
        """
        prefix_tuple = tuple(str(prefix) for prefix in prefixes)
        if not prefix_tuple:
            return 0

        stale_keys = [key for key in self._entries if key.startswith(prefix_tuple)]
        for key in stale_keys:
            del self._entries[key]

        if stale_keys:
            logger.debug(f"Removed {len(stale_keys)} cache entries matching {prefix_tuple}")
        return len(stale_keys)

    def keys(self) -> set[str]:
        """Get all keys that currently have cached data."""
        return set(self._entries.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
