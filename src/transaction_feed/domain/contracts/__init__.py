"""Protocols shared between the application layer and adapters."""

from transaction_feed.domain.contracts.request_cache import RequestCacheProtocol
from transaction_feed.domain.contracts.transaction_view import TransactionViewProtocol

__all__ = ["RequestCacheProtocol", "TransactionViewProtocol"]
