"""Pagination domain models."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, Field

from transaction_feed.domain.models.transaction import Transaction

# Cursor value meaning "no further pages"; distinct from "nothing loaded yet" (state is None)
TERMINAL_PAGE = -1
FIRST_PAGE = 0


class PaginatedResponse(BaseModel):
    """One page of transactions as returned by the paginated endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    data: list[Transaction]
    next_page: int | None = Field(default=None, alias="nextPage")


@dataclass(frozen=True)
class PaginatedState:
    """Accumulated pages of the "all transactions" listing.

    ``data`` only ever grows by appending newly fetched pages in page order.
    ``next_page`` is the page to request next, or ``TERMINAL_PAGE``.
    """

    data: list[Transaction] = field(default_factory=list)
    next_page: int = FIRST_PAGE

    @property
    def is_complete(self) -> bool:
        """Whether the last page has been fetched."""
        return self.next_page == TERMINAL_PAGE
