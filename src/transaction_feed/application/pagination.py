"""Accumulation of paginated transaction listings."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from transaction_feed.domain.models.endpoint import Endpoint
from transaction_feed.domain.models.paginated import (
    FIRST_PAGE,
    TERMINAL_PAGE,
    PaginatedResponse,
    PaginatedState,
)

if TYPE_CHECKING:
    from transaction_feed.application.cached_fetcher import CachedFetcher
    from transaction_feed.domain.models.transaction import Transaction

logger = logging.getLogger(__name__)


def merge_page(
    previous: PaginatedState | None, response: PaginatedResponse | None
) -> PaginatedState | None:
    """Fold a freshly fetched page into the accumulated state.

    A missing response resets the state to None. The first page becomes the
    state as is; later pages are appended. A response without a next page
    turns the cursor into ``TERMINAL_PAGE``.
    """
    if response is None:
        return None

    next_page = TERMINAL_PAGE if response.next_page is None else response.next_page
    if previous is None:
        return PaginatedState(data=list(response.data), next_page=next_page)

    return PaginatedState(data=[*previous.data, *response.data], next_page=next_page)


class PaginationAccumulator:
    """Owns the growing "all transactions" listing.

    Page requests are serialized, so overlapping ``fetch_next_page`` calls
    fetch consecutive pages. A response that arrives after ``invalidate``
    is discarded.
    """

    def __init__(self, fetcher: CachedFetcher) -> None:
        """Initialize with nothing loaded.

        Args:
            fetcher: Fetcher used for page requests (cached).
        """
        self.fetcher = fetcher
        self._state: PaginatedState | None = None
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def state(self) -> PaginatedState | None:
        """Accumulated pages, or None when not loaded or invalidated."""
        return self._state

    @property
    def data(self) -> list[Transaction] | None:
        """Accumulated transactions, or None when not loaded."""
        return None if self._state is None else self._state.data

    @property
    def loading(self) -> bool:
        """Whether a page request is in flight."""
        return self.fetcher.loading

    @property
    def has_more(self) -> bool:
        """Whether another page can be fetched."""
        return self._state is None or not self._state.is_complete

    async def fetch_next_page(self) -> None:
        """Fetch the next page and append it to the accumulated data.

        Requests page 0 when nothing is loaded, the stored cursor otherwise,
        and does nothing once the last page has been fetched. Fetch errors
        propagate and leave the state unchanged.
        """
        async with self._lock:
            if self._state is not None and self._state.is_complete:
                logger.debug("All pages already fetched, skipping request")
                return

            generation = self._generation
            page = FIRST_PAGE if self._state is None else self._state.next_page
            payload = await self.fetcher.fetch_with_cache(
                Endpoint.PAGINATED_TRANSACTIONS, {"page": page}
            )

            if generation != self._generation:
                logger.warning(f"Discarding page {page}: listing was invalidated while fetching")
                return

            response = None if payload is None else PaginatedResponse.model_validate(payload)
            self._state = merge_page(self._state, response)
            if self._state is not None:
                logger.debug(
                    f"Page {page} merged: {len(self._state.data)} transaction(s), "
                    f"next page {self._state.next_page}"
                )

    def invalidate(self) -> None:
        """Reset the listing to "not loaded". The request cache is left untouched."""
        self._generation += 1
        self._state = None
