"""Domain models for the transaction feed."""

from transaction_feed.domain.models.active_source import ActiveSource
from transaction_feed.domain.models.employee import EMPTY_EMPLOYEE, Employee
from transaction_feed.domain.models.endpoint import Endpoint
from transaction_feed.domain.models.paginated import (
    FIRST_PAGE,
    TERMINAL_PAGE,
    PaginatedResponse,
    PaginatedState,
)
from transaction_feed.domain.models.transaction import Transaction

__all__ = [
    "EMPTY_EMPLOYEE",
    "FIRST_PAGE",
    "TERMINAL_PAGE",
    "ActiveSource",
    "Employee",
    "Endpoint",
    "PaginatedResponse",
    "PaginatedState",
    "Transaction",
]
