"""Employee domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """An employee that transactions can be filtered by."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")

    @property
    def full_name(self) -> str:
        """Label shown in the employee filter."""
        return f"{self.first_name} {self.last_name}"


# Reserved "no filter" entry; real employee ids are never empty
EMPTY_EMPLOYEE = Employee(id="", first_name="All", last_name="Employees")
