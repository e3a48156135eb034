"""In-process transaction backend serving fixed data."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from transaction_feed.adapters.api_request_logger import log_api_request
from transaction_feed.domain.errors import FetchError
from transaction_feed.domain.models.endpoint import Endpoint
from transaction_feed.domain.ports.transaction_backend import TransactionBackend

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 5


class InMemoryTransactionBackend(TransactionBackend):
    """Backend over in-memory employee and transaction lists.

    Pages are ``page_size`` transactions long; ``nextPage`` is ``page + 1``
    while transactions remain after the page, otherwise None.
    """

    def __init__(
        self,
        employees: list[dict[str, Any]],
        transactions: list[dict[str, Any]],
        page_size: int = DEFAULT_PAGE_SIZE,
        latency_ms: int = 0,
        log_requests: bool = False,
    ) -> None:
        """Initialize with raw employee and transaction records.

        Args:
            employees: Employee records (``id``, ``firstName``, ``lastName``).
            transactions: Transaction records, each with a nested ``employee``.
            page_size: Transactions per page.
            latency_ms: Delay added to every call.
            log_requests: Log every request at INFO level.
        """
        self._employees = employees
        self._transactions = transactions
        self.page_size = page_size
        self.latency_ms = latency_ms
        self._log_requests = log_requests
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    @classmethod
    def from_json_file(cls, path: str | Path, **kwargs: Any) -> InMemoryTransactionBackend:
        """Load employees and transactions from a JSON file.

        The file must hold an object with ``employees`` and ``transactions`` lists.
        """
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Data file not found: {file_path}")

        with open(file_path, encoding="utf-8") as f:
            raw = json.load(f)

        if not isinstance(raw, dict):
            raise ValueError("Data file must contain a JSON object")
        employees = raw.get("employees", [])
        transactions = raw.get("transactions", [])
        if not isinstance(employees, list) or not isinstance(transactions, list):
            raise ValueError("'employees' and 'transactions' must be lists")

        logger.info(
            f"Loaded {len(employees)} employee(s) and {len(transactions)} transaction(s) "
            f"from {file_path}"
        )
        return cls(employees, transactions, **kwargs)

    def _paginated_transactions(self, params: dict[str, Any] | None) -> dict[str, Any]:
        page = (params or {}).get("page")
        if not isinstance(page, int) or page < 0:
            raise FetchError(Endpoint.PAGINATED_TRANSACTIONS, f"Invalid page {page!r}")

        start = page * self.page_size
        end = start + self.page_size
        if start > len(self._transactions):
            raise FetchError(Endpoint.PAGINATED_TRANSACTIONS, f"Invalid page {page}")

        next_page = page + 1 if end < len(self._transactions) else None
        return {"data": self._transactions[start:end], "nextPage": next_page}

    def _transactions_by_employee(self, params: dict[str, Any] | None) -> list[dict[str, Any]]:
        employee_id = (params or {}).get("employeeId")
        if not employee_id:
            raise FetchError(Endpoint.TRANSACTIONS_BY_EMPLOYEE, "Employee id cannot be empty")

        return [t for t in self._transactions if t.get("employee", {}).get("id") == employee_id]

    async def fetch(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        """Serve one backend call from memory."""
        endpoint = str(endpoint)
        self.calls.append((endpoint, params))

        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000.0)

        if endpoint == Endpoint.PAGINATED_TRANSACTIONS.value:
            result: Any = self._paginated_transactions(params)
        elif endpoint == Endpoint.TRANSACTIONS_BY_EMPLOYEE.value:
            result = self._transactions_by_employee(params)
        elif endpoint == Endpoint.EMPLOYEES.value:
            result = list(self._employees)
        else:
            raise FetchError(endpoint, "Unknown endpoint")

        log_api_request("FETCH", endpoint, params, result, enabled=self._log_requests)
        return result

    def call_count(self, endpoint: str) -> int:
        """Number of calls served for an endpoint."""
        return sum(1 for called, _ in self.calls if called == str(endpoint))
