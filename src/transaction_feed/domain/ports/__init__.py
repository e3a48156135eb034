"""Ports (interfaces) for the ports-and-adapters architecture."""

from transaction_feed.domain.ports.transaction_backend import TransactionBackend

__all__ = ["TransactionBackend"]
