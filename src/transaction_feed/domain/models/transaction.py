"""Transaction domain model."""

from pydantic import BaseModel, ConfigDict

from transaction_feed.domain.models.employee import Employee


class Transaction(BaseModel):
    """A single card transaction as returned by the backend."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    amount: float
    employee: Employee
    merchant: str
    date: str
    approved: bool = False
