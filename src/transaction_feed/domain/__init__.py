"""Domain layer - models, contracts and ports."""

from transaction_feed.domain.errors import CacheDecodeError, FetchError
from transaction_feed.domain.models import (
    EMPTY_EMPLOYEE,
    ActiveSource,
    Employee,
    Endpoint,
    PaginatedResponse,
    PaginatedState,
    Transaction,
)
from transaction_feed.domain.ports import TransactionBackend

__all__ = [
    "EMPTY_EMPLOYEE",
    "ActiveSource",
    "CacheDecodeError",
    "Employee",
    "Endpoint",
    "FetchError",
    "PaginatedResponse",
    "PaginatedState",
    "Transaction",
    "TransactionBackend",
]
