"""Transaction backend port."""

from typing import Any, Protocol


class TransactionBackend(Protocol):
    """Port for the remote operations behind the transaction listing.

    Payloads are JSON-compatible values:

    - ``paginatedTransactions`` with ``{"page": int}`` returns
      ``{"data": [...], "nextPage": int | None}``.
    - ``transactionsByEmployee`` with ``{"employeeId": str}`` returns a list of transactions.
    - ``employees`` without params returns a list of employees.
    """

    async def fetch(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Perform one backend call, raising ``FetchError`` on failure."""
        ...
