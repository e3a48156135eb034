"""Fetching backend data through the shared request cache."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from transaction_feed.application.request_executor import RequestExecutor
from transaction_feed.domain.errors import CacheDecodeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from transaction_feed.domain.contracts.request_cache import RequestCacheProtocol
    from transaction_feed.domain.ports.transaction_backend import TransactionBackend

logger = logging.getLogger(__name__)


def get_cache_key(endpoint: str, params: dict[str, Any] | None = None) -> str:
    """Build the cache key for an endpoint and its params.

    The key is the endpoint alone when params are absent, otherwise
    ``endpoint@<compact JSON of params>``. Params are serialized with sorted
    keys so equal dicts always map to the same key.
    """
    endpoint = str(endpoint)
    if params is None:
        return endpoint
    return f"{endpoint}@{json.dumps(params, separators=(',', ':'), sort_keys=True)}"


class CachedFetcher:
    """Backend calls with and without the request cache.

    Every call, including cache hits, goes through the executor so that
    ``loading`` reflects the fetcher's activity.
    """

    def __init__(
        self,
        backend: TransactionBackend,
        cache: RequestCacheProtocol,
        executor: RequestExecutor | None = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            backend: Backend performing the underlying calls.
            cache: Request cache shared by all fetchers of a session.
            executor: Executor tracking this fetcher's in-flight calls.
        """
        self.backend = backend
        self.cache = cache
        self.executor = executor or RequestExecutor()

    @property
    def loading(self) -> bool:
        """Whether a call made through this fetcher is pending."""
        return self.executor.loading

    async def fetch_with_cache(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Return cached data for the key, or fetch and cache it.

        Args:
            endpoint: Endpoint to fetch.
            params: Endpoint params (optional).

        Returns:
            The decoded payload.

        Raises:
            FetchError: If the backend call fails. Nothing is cached in that case.
            CacheDecodeError: If the cached entry cannot be decoded.
        """

        async def _fetch() -> Any:
            cache_key = get_cache_key(endpoint, params)
            cached = self.cache.get(cache_key)
            if cached is not None:
                logger.debug(f"Cache hit for {cache_key}")
                return self._decode(cache_key, cached)

            logger.debug(f"Cache miss for {cache_key}, fetching from backend")
            result = await self.backend.fetch(str(endpoint), params)
            self.cache.set(cache_key, json.dumps(result))
            return result

        return await self.executor.run(_fetch)

    async def fetch_without_cache(
        self, endpoint: str, params: dict[str, Any] | None = None
    ) -> Any:
        """Always fetch from the backend; the cache is neither read nor written."""

        async def _fetch() -> Any:
            return await self.backend.fetch(str(endpoint), params)

        return await self.executor.run(_fetch)

    def clear_cache(self) -> None:
        """Drop every cached response."""
        self.cache.clear()

    def clear_cache_by_endpoint(self, endpoints: Iterable[str]) -> int:
        """Drop cached responses of the given endpoints.

        Returns:
            Number of removed entries.
        """
        return self.cache.clear_matching_prefixes(str(endpoint) for endpoint in endpoints)

    @staticmethod
    def _decode(cache_key: str, cached: str) -> Any:
        try:
            return json.loads(cached)
        except ValueError as e:
            logger.error(f"Corrupt cache entry for {cache_key}: {e}")
            raise CacheDecodeError(cache_key, str(e)) from e
