"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.entities import HistoryRecord
from app.domain.enums import Department, EmploymentStatus, HistoryOperation
from app.domain.exceptions import (
    DuplicateEmployeeException,
    InconsistentWriteException,
    RecordsException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from app.domain.value_objects import (
    FieldChange,
    FieldDifference,
    Provenance,
    Snapshot,
)

__all__ = [
    # Entities
    "HistoryRecord",
    # Enums
    "Department",
    "EmploymentStatus",
    "HistoryOperation",
    # Exceptions
    "DuplicateEmployeeException",
    "InconsistentWriteException",
    "RecordsException",
    "ResourceNotFoundException",
    "SqlNotConfiguredException",
    "ValidationException",
    # Value objects
    "FieldChange",
    "FieldDifference",
    "Provenance",
    "Snapshot",
]
