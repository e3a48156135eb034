"""Coordination of the "all transactions" and "by employee" sources."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from transaction_feed.domain.contracts.transaction_view import TransactionViewProtocol
from transaction_feed.domain.models.active_source import ActiveSource
from transaction_feed.domain.models.employee import EMPTY_EMPLOYEE, Employee

if TYPE_CHECKING:
    from transaction_feed.application.employee_sources import (
        EmployeeListLoader,
        EmployeeTransactionsLoader,
    )
    from transaction_feed.application.pagination import PaginationAccumulator
    from transaction_feed.domain.models.transaction import Transaction

logger = logging.getLogger(__name__)


class DataSourceCoordinator(TransactionViewProtocol):
    """Decides which transaction source is active and exposes one unified view.

    At most one of the two sources holds data: every switch invalidates the
    other source before fetching. Mutating entry points are
    ``select_all_employees``, ``select_employee``, ``select_filter``,
    ``load_more`` and ``start``; they are meant to be called by the UI in
    response to user actions.
    """

    def __init__(
        self,
        paginated: PaginationAccumulator,
        by_employee: EmployeeTransactionsLoader,
        employee_loader: EmployeeListLoader,
    ) -> None:
        """Initialize the coordinator.

        Args:
            paginated: Accumulator of the "all transactions" listing.
            by_employee: Loader of a single employee's transactions.
            employee_loader: Loader of the employee list used by the filter.
        """
        self.paginated = paginated
        self.by_employee = by_employee
        self.employee_loader = employee_loader
        self._selected_employee_id: str | None = None
        self._selection_generation = 0

    @property
    def transactions(self) -> list[Transaction] | None:
        """Paginated data if present, else the employee's transactions, else None."""
        if self.paginated.data is not None:
            return self.paginated.data
        return self.by_employee.transactions

    @property
    def active_source(self) -> ActiveSource:
        if self.paginated.data is not None:
            return ActiveSource.PAGINATED_ALL
        if self.by_employee.transactions is not None:
            return ActiveSource.BY_EMPLOYEE
        return ActiveSource.NONE

    @property
    def employees(self) -> list[Employee] | None:
        return self.employee_loader.employees

    @property
    def employee_options(self) -> list[Employee]:
        """Filter entries: the "all employees" entry followed by every employee."""
        employees = self.employee_loader.employees
        if employees is None:
            return []
        return [EMPTY_EMPLOYEE, *employees]

    @property
    def selected_employee_id(self) -> str | None:
        """Id of the filtered employee, or None for all employees."""
        return self._selected_employee_id

    @property
    def selected_employee(self) -> Employee | None:
        """The filtered employee if it is part of the loaded employee list."""
        if self._selected_employee_id is None or self.employees is None:
            return None
        return next((e for e in self.employees if e.id == self._selected_employee_id), None)

    @property
    def employees_loading(self) -> bool:
        return self.employee_loader.loading

    @property
    def transactions_loading(self) -> bool:
        return self.paginated.loading

    @property
    def loading(self) -> bool:
        """Whether any source has a request in flight."""
        return self.employee_loader.loading or self.paginated.loading or self.by_employee.loading

    @property
    def has_more(self) -> bool:
        """Whether ``load_more`` would add rows to the paginated listing."""
        return self.active_source is ActiveSource.PAGINATED_ALL and self.paginated.has_more

    async def start(self) -> None:
        """Load the initial view unless the employee list is already loaded or loading."""
        if self.employee_loader.employees is None and not self.employee_loader.loading:
            await self.select_all_employees()

    async def select_all_employees(self) -> None:
        """Show all transactions.

        Invalidates the per-employee source, reloads the employee list and
        then fetches the next page of the paginated listing. The page is not
        fetched if another selection was made while the employee list loaded.
        """
        logger.info("Filter changed to all employees")
        self._selection_generation += 1
        generation = self._selection_generation
        self._selected_employee_id = None
        self.by_employee.invalidate()
        await self.employee_loader.fetch_all()

        if generation != self._selection_generation:
            logger.warning("Filter changed while loading employees, skipping transactions page")
            return
        await self.paginated.fetch_next_page()

    async def select_employee(self, employee_id: str) -> None:
        """Show the transactions of one employee.

        The reserved "all employees" id selects all transactions instead.
        """
        if employee_id == EMPTY_EMPLOYEE.id:
            await self.select_all_employees()
            return

        logger.info(f"Filter changed to employee {employee_id}")
        self._selection_generation += 1
        self._selected_employee_id = employee_id
        self.paginated.invalidate()
        await self.by_employee.fetch_by_id(employee_id)

    async def select_filter(self, employee: Employee | None) -> None:
        """Apply a selection made in the employee filter. A cleared selection is ignored."""
        if employee is None:
            return
        await self.select_employee(employee.id)

    async def load_more(self) -> None:
        """Reload the employee's transactions, or fetch the next page of all transactions."""
        if self._selected_employee_id is not None:
            await self.by_employee.fetch_by_id(self._selected_employee_id)
            return
        await self.paginated.fetch_next_page()
