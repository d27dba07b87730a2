"""Domain enumerations for the employee records service.

Enums represent fixed sets of domain values (history operations,
employment status, departments).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class HistoryOperation(_ValuesMixin, str, Enum):
    """Kind of mutation captured by a history record. Fixed at creation."""

    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


class EmploymentStatus(_ValuesMixin, str, Enum):
    """Employee status. Soft delete moves an employee to INACTIVE."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class Department(_ValuesMixin, str, Enum):
    """Departments an employee can belong to."""

    ENGINEERING = "Engineering"
    MARKETING = "Marketing"
    SALES = "Sales"
    HUMAN_RESOURCES = "Human Resources"
    FINANCE = "Finance"
    OPERATIONS = "Operations"
    IT = "IT"
    CUSTOMER_SUPPORT = "Customer Support"
    ADMINISTRATION = "Administration"
