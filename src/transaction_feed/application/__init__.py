"""Application layer - caching, pagination and source coordination."""

from transaction_feed.application.cached_fetcher import CachedFetcher, get_cache_key
from transaction_feed.application.coordinator import DataSourceCoordinator
from transaction_feed.application.employee_sources import (
    EmployeeListLoader,
    EmployeeTransactionsLoader,
)
from transaction_feed.application.pagination import PaginationAccumulator, merge_page
from transaction_feed.application.request_executor import RequestExecutor

__all__ = [
    "CachedFetcher",
    "DataSourceCoordinator",
    "EmployeeListLoader",
    "EmployeeTransactionsLoader",
    "PaginationAccumulator",
    "RequestExecutor",
    "get_cache_key",
    "merge_page",
]
