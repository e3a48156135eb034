"""Tests for DataSourceCoordinator source switching and the unified view."""

import asyncio

import pytest

from transaction_feed.domain.errors import FetchError
from transaction_feed.domain.models import EMPTY_EMPLOYEE, ActiveSource, Employee
from transaction_feed.factory import build_coordinator


def _ids(transactions) -> list[str]:
    return [t.id for t in transactions or []]


class TestInitialState:
    """Tests for the state before and right after startup."""

    def test_when_nothing_loaded_then_view_is_empty(self, coordinator) -> None:
        """Given a fresh coordinator, when reading the view, then nothing is active."""
        assert coordinator.transactions is None
        assert coordinator.active_source is ActiveSource.NONE
        assert coordinator.employee_options == []
        assert coordinator.loading is False
        assert coordinator.has_more is False

    @pytest.mark.asyncio
    async def test_when_started_then_all_transactions_are_loaded(self, coordinator, backend) -> None:
        """Given a fresh coordinator, when starting, then employees and page 0 are loaded."""
        await coordinator.start()

        assert coordinator.active_source is ActiveSource.PAGINATED_ALL
        assert _ids(coordinator.transactions) == ["t0", "t1", "t2", "t3", "t4"]
        assert coordinator.employee_options[0] == EMPTY_EMPLOYEE
        assert [e.id for e in coordinator.employee_options[1:]] == ["e1", "e2", "e3"]
        assert coordinator.has_more is True

    @pytest.mark.asyncio
    async def test_when_started_twice_then_second_start_is_noop(self, coordinator, backend) -> None:
        """Given a started coordinator, when starting again, then no new request is made."""
        await coordinator.start()
        calls_before = len(backend.calls)

        await coordinator.start()

        assert len(backend.calls) == calls_before


class TestSourceSwitching:
    """Tests for mutual exclusivity of the two sources."""

    @pytest.mark.asyncio
    async def test_when_employee_selected_then_paginated_is_reset(self, coordinator) -> None:
        """Given all transactions loaded, when selecting an employee, then only that source is populated."""
        await coordinator.select_all_employees()

        await coordinator.select_employee("e2")

        assert coordinator.paginated.state is None
        assert coordinator.active_source is ActiveSource.BY_EMPLOYEE
        assert {t.employee.id for t in coordinator.transactions} == {"e2"}
        assert coordinator.selected_employee_id == "e2"
        assert coordinator.selected_employee.full_name == "Mary Jones"
        assert coordinator.has_more is False

    @pytest.mark.asyncio
    async def test_when_all_selected_then_by_employee_is_reset(self, coordinator) -> None:
        """Given an employee selected, when selecting all, then the per-employee source is cleared."""
        await coordinator.select_employee("e1")

        await coordinator.select_all_employees()

        assert coordinator.by_employee.transactions is None
        assert coordinator.active_source is ActiveSource.PAGINATED_ALL
        assert coordinator.selected_employee_id is None

    @pytest.mark.asyncio
    async def test_when_both_sources_populated_then_paginated_wins(self, coordinator) -> None:
        """Given both sources forced to hold data, when reading the view, then paginated data is shown."""
        await coordinator.select_employee("e1")
        await coordinator.paginated.fetch_next_page()

        assert coordinator.active_source is ActiveSource.PAGINATED_ALL
        assert _ids(coordinator.transactions) == ["t0", "t1", "t2", "t3", "t4"]

    @pytest.mark.asyncio
    async def test_when_empty_employee_selected_then_all_transactions_shown(
        self, coordinator
    ) -> None:
        """Given an employee selected, when the filter picks the "all" entry, then all transactions show."""
        await coordinator.select_employee("e1")

        await coordinator.select_filter(EMPTY_EMPLOYEE)

        assert coordinator.active_source is ActiveSource.PAGINATED_ALL

    @pytest.mark.asyncio
    async def test_when_filter_cleared_then_nothing_changes(self, coordinator, backend) -> None:
        """Given a cleared filter selection, when applied, then no request is made."""
        await coordinator.select_filter(None)

        assert backend.calls == []

    @pytest.mark.asyncio
    async def test_when_filter_picks_employee_then_that_employee_is_shown(self, coordinator) -> None:
        """Given an employee entry, when applied through the filter, then its transactions show."""
        employee = Employee(id="e1", first_name="James", last_name="Smith")

        await coordinator.select_filter(employee)

        assert coordinator.selected_employee_id == "e1"
        assert {t.employee.id for t in coordinator.transactions} == {"e1"}


class TestLoadMore:
    """Tests for load_more routing."""

    @pytest.mark.asyncio
    async def test_when_all_selected_then_next_page_is_appended(self, coordinator, backend) -> None:
        """Given all transactions, when loading more until exhausted, then every page is appended once."""
        await coordinator.select_all_employees()

        await coordinator.load_more()
        await coordinator.load_more()
        await coordinator.load_more()

        assert _ids(coordinator.transactions) == [f"t{i}" for i in range(12)]
        assert backend.call_count("paginatedTransactions") == 3
        assert backend.call_count("employees") == 1
        assert coordinator.has_more is False

    @pytest.mark.asyncio
    async def test_when_employee_selected_then_full_list_is_reissued(
        self, coordinator, backend
    ) -> None:
        """Given an employee selected, when loading more, then the same complete list is shown."""
        await coordinator.select_employee("e1")
        before = _ids(coordinator.transactions)

        await coordinator.load_more()

        assert _ids(coordinator.transactions) == before
        assert backend.call_count("paginatedTransactions") == 0


class TestConcurrentSelections:
    """Tests for filter changes made while an earlier selection is still loading."""

    @pytest.mark.asyncio
    async def test_when_employee_selected_during_employee_load_then_only_that_source_is_populated(
        self, backend, cache, gate_endpoints
    ) -> None:
        """Given all employees loading, when an employee is selected meanwhile, then no page is fetched."""
        gated = gate_endpoints("employees")
        coordinator = build_coordinator(backend=gated, cache=cache)

        select_all = asyncio.create_task(coordinator.select_all_employees())
        while gated.started == 0:
            await asyncio.sleep(0)
        await coordinator.select_employee("e1")
        gated.gate.set()
        await select_all

        assert coordinator.paginated.state is None
        assert coordinator.active_source is ActiveSource.BY_EMPLOYEE
        assert {t.employee.id for t in coordinator.transactions} == {"e1"}
        assert coordinator.selected_employee_id == "e1"
        assert backend.call_count("paginatedTransactions") == 0

    @pytest.mark.asyncio
    async def test_when_all_selected_during_employee_load_then_by_employee_is_dropped(
        self, cache, gate_endpoints
    ) -> None:
        """Given an employee loading, when all employees are selected meanwhile, then only pages are shown."""
        gated = gate_endpoints("transactionsByEmployee")
        coordinator = build_coordinator(backend=gated, cache=cache)

        select_employee = asyncio.create_task(coordinator.select_employee("e1"))
        while gated.started == 0:
            await asyncio.sleep(0)
        await coordinator.select_all_employees()
        gated.gate.set()
        await select_employee

        assert coordinator.by_employee.transactions is None
        assert coordinator.active_source is ActiveSource.PAGINATED_ALL
        assert coordinator.selected_employee_id is None


class TestErrors:
    """Tests for failure propagation."""

    @pytest.mark.asyncio
    async def test_when_employee_fetch_fails_then_error_propagates_and_flags_reset(
        self, coordinator, backend
    ) -> None:
        """Given a failing employee list, when selecting all, then the error surfaces and no page is fetched."""

        async def failing_fetch(endpoint, params=None):
            raise FetchError(endpoint, "service unavailable", status_code=503)

        backend.fetch = failing_fetch

        with pytest.raises(FetchError, match="service unavailable"):
            await coordinator.select_all_employees()

        assert coordinator.transactions is None
        assert coordinator.employees_loading is False
        assert coordinator.transactions_loading is False


class TestEndToEnd:
    """Full filter-switching scenario over a shared cache."""

    @pytest.mark.asyncio
    async def test_switching_filters_reuses_cached_first_page(
        self, coordinator, backend, cache
    ) -> None:
        """Given an empty cache, when switching all -> employee -> all, then page 0 is fetched only once."""
        await coordinator.select_all_employees()

        assert backend.call_count("employees") == 1
        assert backend.call_count("paginatedTransactions") == 1
        assert 'paginatedTransactions@{"page":0}' in cache
        assert "employees" not in cache

        await coordinator.select_employee("e1")

        assert coordinator.paginated.state is None
        assert backend.calls[-1] == ("transactionsByEmployee", {"employeeId": "e1"})
        assert {t.employee.id for t in coordinator.transactions} == {"e1"}

        await coordinator.select_all_employees()

        assert coordinator.by_employee.transactions is None
        assert backend.call_count("paginatedTransactions") == 1
        assert backend.call_count("employees") == 2
        assert _ids(coordinator.transactions) == ["t0", "t1", "t2", "t3", "t4"]
