"""Active data source domain model."""

from enum import Enum


class ActiveSource(str, Enum):
    """Which transaction source currently feeds the unified view."""

    NONE = "none"
    PAGINATED_ALL = "paginated_all"
    BY_EMPLOYEE = "by_employee"
