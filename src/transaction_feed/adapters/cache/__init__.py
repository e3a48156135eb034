"""Request cache adapters."""

from transaction_feed.adapters.cache.in_memory_request_cache import InMemoryRequestCache

__all__ = ["InMemoryRequestCache"]
