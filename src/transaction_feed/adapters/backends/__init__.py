"""Transaction backend adapters."""

from transaction_feed.adapters.backends.http_transaction_backend import HttpTransactionBackend
from transaction_feed.adapters.backends.in_memory_transaction_backend import (
    InMemoryTransactionBackend,
)

__all__ = ["HttpTransactionBackend", "InMemoryTransactionBackend"]
