"""Wiring of backends, cache and sources into a coordinator."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import aiohttp

from transaction_feed.adapters.backends import HttpTransactionBackend, InMemoryTransactionBackend
from transaction_feed.adapters.cache import InMemoryRequestCache
from transaction_feed.adapters.config import AppConfig
from transaction_feed.application.cached_fetcher import CachedFetcher
from transaction_feed.application.coordinator import DataSourceCoordinator
from transaction_feed.application.employee_sources import (
    EmployeeListLoader,
    EmployeeTransactionsLoader,
)
from transaction_feed.application.pagination import PaginationAccumulator
from transaction_feed.application.request_executor import RequestExecutor

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from aiohttp import ClientSession

    from transaction_feed.domain.contracts.request_cache import RequestCacheProtocol
    from transaction_feed.domain.ports.transaction_backend import TransactionBackend

logger = logging.getLogger(__name__)


def build_backend(config: AppConfig, session: ClientSession | None = None) -> TransactionBackend:
    """Create the backend selected by the configuration."""
    if config.backend_url:
        if session is None:
            raise ValueError("An aiohttp session is required when backend_url is set")
        logger.info(f"Using HTTP transaction backend at {config.backend_url}")
        return HttpTransactionBackend(
            config.backend_url,
            session,
            timeout_seconds=config.request_timeout_seconds,
            log_requests=config.log_requests,
        )

    options = {
        "page_size": config.page_size,
        "latency_ms": config.simulated_latency_ms,
        "log_requests": config.log_requests,
    }
    if config.data_file:
        return InMemoryTransactionBackend.from_json_file(config.data_file, **options)

    logger.warning("No backend_url or data_file configured, serving an empty in-memory backend")
    return InMemoryTransactionBackend([], [], **options)


def build_coordinator(
    config: AppConfig | None = None,
    session: ClientSession | None = None,
    backend: TransactionBackend | None = None,
    cache: RequestCacheProtocol | None = None,
) -> DataSourceCoordinator:
    """Build a coordinator whose sources share one request cache.

    Each source gets its own executor, so each exposes its own loading flag.

    Args:
        config: Application configuration (read from the environment if omitted).
        session: aiohttp session, required for the HTTP backend.
        backend: Backend to use instead of the configured one.
        cache: Request cache to share instead of a fresh one.
    """
    if backend is None:
        backend = build_backend(config or AppConfig(), session)
    if cache is None:
        cache = InMemoryRequestCache()

    def _fetcher() -> CachedFetcher:
        return CachedFetcher(backend, cache, RequestExecutor())

    return DataSourceCoordinator(
        paginated=PaginationAccumulator(_fetcher()),
        by_employee=EmployeeTransactionsLoader(_fetcher()),
        employee_loader=EmployeeListLoader(_fetcher()),
    )


@asynccontextmanager
async def open_coordinator(config: AppConfig | None = None) -> AsyncIterator[DataSourceCoordinator]:
    """Yield a coordinator, owning the aiohttp session when an HTTP backend is configured."""
    config = config or AppConfig()
    if config.backend_url:
        async with aiohttp.ClientSession() as session:
            yield build_coordinator(config, session=session)
        return

    yield build_coordinator(config)
