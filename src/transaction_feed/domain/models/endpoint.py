"""Endpoint domain model."""

from enum import Enum


class Endpoint(str, Enum):
    """Logical identifiers of the remote operations the backend exposes."""

    PAGINATED_TRANSACTIONS = "paginatedTransactions"
    TRANSACTIONS_BY_EMPLOYEE = "transactionsByEmployee"
    EMPLOYEES = "employees"

    def __str__(self) -> str:
        return self.value
