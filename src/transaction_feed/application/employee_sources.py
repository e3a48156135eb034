"""Employee list and per-employee transaction sources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import TypeAdapter

from transaction_feed.domain.models.employee import Employee
from transaction_feed.domain.models.endpoint import Endpoint
from transaction_feed.domain.models.transaction import Transaction

if TYPE_CHECKING:
    from transaction_feed.application.cached_fetcher import CachedFetcher

logger = logging.getLogger(__name__)

_EMPLOYEE_LIST = TypeAdapter(list[Employee])
_TRANSACTION_LIST = TypeAdapter(list[Transaction])


class EmployeeListLoader:
    """Loads the employee list for the filter. Always refetches, never cached."""

    def __init__(self, fetcher: CachedFetcher) -> None:
        self.fetcher = fetcher
        self._employees: list[Employee] | None = None

    @property
    def employees(self) -> list[Employee] | None:
        return self._employees

    @property
    def loading(self) -> bool:
        return self.fetcher.loading

    async def fetch_all(self) -> None:
        """Fetch the employee list, replacing the previous one."""
        payload = await self.fetcher.fetch_without_cache(Endpoint.EMPLOYEES)
        self._employees = None if payload is None else _EMPLOYEE_LIST.validate_python(payload)
        if self._employees is not None:
            logger.debug(f"Loaded {len(self._employees)} employee(s)")


class EmployeeTransactionsLoader:
    """Loads the complete transaction list of one employee.

    Each call returns the full list, not an increment. Only the response of
    the most recent request is kept.
    """

    def __init__(self, fetcher: CachedFetcher) -> None:
        """Initialize with nothing loaded.

        Args:
            fetcher: Fetcher used for the per-employee request (cached).
        """
        self.fetcher = fetcher
        self._transactions: list[Transaction] | None = None
        self._generation = 0

    @property
    def transactions(self) -> list[Transaction] | None:
        """Transactions of the last requested employee, or None when not loaded."""
        return self._transactions

    @property
    def loading(self) -> bool:
        return self.fetcher.loading

    async def fetch_by_id(self, employee_id: str) -> None:
        """Fetch all transactions of an employee.

        Args:
            employee_id: Id of a real employee.

        Raises:
            ValueError: If the employee id is empty.
        """
        if not employee_id:
            raise ValueError("Employee id cannot be empty")

        self._generation += 1
        generation = self._generation
        payload = await self.fetcher.fetch_with_cache(
            Endpoint.TRANSACTIONS_BY_EMPLOYEE, {"employeeId": employee_id}
        )

        if generation != self._generation:
            logger.warning(f"Discarding transactions of employee {employee_id}: superseded")
            return

        self._transactions = (
            None if payload is None else _TRANSACTION_LIST.validate_python(payload)
        )

    def invalidate(self) -> None:
        """Reset to "not loaded" and ignore any response still in flight."""
        self._generation += 1
        self._transactions = None
