"""Protocol for the read side exposed to the UI."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from transaction_feed.domain.models.employee import Employee
    from transaction_feed.domain.models.transaction import Transaction


class TransactionViewProtocol(Protocol):
    """State a UI reads to render the transaction table and the employee filter."""

    @property
    def transactions(self) -> "list[Transaction] | None":
        """Unified transaction list, or None when nothing is loaded."""
        ...

    @property
    def employee_options(self) -> "list[Employee]":
        """Entries for the employee filter, starting with the "all" entry."""
        ...

    @property
    def employees_loading(self) -> bool:
        """Whether the employee list is being fetched."""
        ...

    @property
    def transactions_loading(self) -> bool:
        """Whether a paginated transactions request is in flight."""
        ...

    @property
    def has_more(self) -> bool:
        """Whether "load more" can produce more rows."""
        ...

    async def select_all_employees(self) -> None:
        """Switch the view to all transactions."""
        ...

    async def select_employee(self, employee_id: str) -> None:
        """Switch the view to transactions of one employee."""
        ...

    async def load_more(self) -> None:
        """Load the next chunk for the active source."""
        ...
