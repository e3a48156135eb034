"""Adapters layer - cache, backends and configuration."""

from transaction_feed.adapters.backends import (
    HttpTransactionBackend,
    InMemoryTransactionBackend,
)
from transaction_feed.adapters.cache import InMemoryRequestCache
from transaction_feed.adapters.config import AppConfig

__all__ = [
    "AppConfig",
    "HttpTransactionBackend",
    "InMemoryRequestCache",
    "InMemoryTransactionBackend",
]
