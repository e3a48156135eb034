"""Shared fixtures for transaction feed tests."""

import asyncio
from typing import Any

import pytest

from transaction_feed.adapters.backends import InMemoryTransactionBackend
from transaction_feed.adapters.cache import InMemoryRequestCache
from transaction_feed.factory import build_coordinator


def _employee(employee_id: str, first_name: str, last_name: str) -> dict[str, Any]:
    return {"id": employee_id, "firstName": first_name, "lastName": last_name}


def _transaction(index: int, employee: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": f"t{index}",
        "amount": 10.0 + index,
        "employee": employee,
        "merchant": f"Merchant {index}",
        "date": f"2022-01-{index + 1:02d}",
        "approved": index % 2 == 0,
    }


class GatedBackend:
    """Backend wrapper that holds calls until ``gate`` is set.

    When ``endpoints`` is given, only calls to those endpoints are held.
    """

    def __init__(self, inner: Any, endpoints: set[str] | None = None) -> None:
        self.inner = inner
        self.endpoints = endpoints
        self.gate = asyncio.Event()
        self.started = 0

    async def fetch(self, endpoint: str, params: dict[str, Any] | None = None) -> Any:
        if self.endpoints is None or endpoint in self.endpoints:
            self.started += 1
            await self.gate.wait()
        return await self.inner.fetch(endpoint, params)


@pytest.fixture
def employees() -> list[dict[str, Any]]:
    """Three employees; the last one has no transactions."""
    return [
        _employee("e1", "James", "Smith"),
        _employee("e2", "Mary", "Jones"),
        _employee("e3", "Robert", "Brown"),
    ]


@pytest.fixture
def transactions(employees: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Twelve transactions alternating between the first two employees.

    With a page size of 5 this gives pages of 5, 5 and 2 transactions.
    """
    return [_transaction(i, employees[i % 2]) for i in range(12)]


@pytest.fixture
def backend(
    employees: list[dict[str, Any]], transactions: list[dict[str, Any]]
) -> InMemoryTransactionBackend:
    """In-memory backend with five transactions per page."""
    return InMemoryTransactionBackend(employees, transactions, page_size=5)


@pytest.fixture
def cache() -> InMemoryRequestCache:
    """Empty request cache."""
    return InMemoryRequestCache()


@pytest.fixture
def coordinator(backend: InMemoryTransactionBackend, cache: InMemoryRequestCache):
    """Coordinator over the in-memory backend and the shared cache fixture."""
    return build_coordinator(backend=backend, cache=cache)


@pytest.fixture
def gated_backend(backend: InMemoryTransactionBackend) -> GatedBackend:
    """In-memory backend whose calls block until ``gate`` is set."""
    return GatedBackend(backend)


@pytest.fixture
def gate_endpoints(backend: InMemoryTransactionBackend):
    """Factory for a backend that holds only calls to the given endpoints."""

    def _gate(*endpoints: str) -> GatedBackend:
        return GatedBackend(backend, endpoints=set(endpoints))

    return _gate
