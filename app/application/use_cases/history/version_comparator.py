"""Version comparator: field-level differences between two history records.

Always diffs the full snapshots, never the records' own change lists, with
the same tracked-field list the recorder uses. Argument order is kept as
given: version1 is the first id, whatever the records' timestamps.
"""

from __future__ import annotations

from collections.abc import Sequence

from app.application.dtos.history import VersionComparison
from app.application.interfaces.repositories import IEmployeeHistoryRepository
from app.application.services.field_differ import compare_snapshots
from app.domain.exceptions import ResourceNotFoundException
from app.domain.value_objects.tracked_fields import TRACKED_FIELD_NAMES


class VersionComparator:
    """Compare two versions of one employee."""

    def __init__(
        self,
        history_repo: IEmployeeHistoryRepository,
        tracked_fields: Sequence[str] = TRACKED_FIELD_NAMES,
    ) -> None:
        self.history_repo = history_repo
        self.tracked_fields = tuple(tracked_fields)

    async def compare(
        self, employee_id: str, version_id1: str, version_id2: str
    ) -> VersionComparison:
        """Return both versions and their differences.

        Comparing a version with itself is valid and yields no differences.

        Raises:
            ResourceNotFoundException: Either version is missing or belongs
                to another employee.
        """
        pair = await self.history_repo.get_two_for_employee(
            employee_id, version_id1, version_id2
        )
        if pair is None:
            raise ResourceNotFoundException(
                "history version", f"{version_id1},{version_id2}"
            )
        version1, version2 = pair
        if not (version1.belongs_to(employee_id) and version2.belongs_to(employee_id)):
            raise ResourceNotFoundException(
                "history version", f"{version_id1},{version_id2}"
            )
        differences = (
            []
            if version1.id == version2.id
            else compare_snapshots(self.tracked_fields, version1.snapshot, version2.snapshot)
        )
        return VersionComparison(
            version1=version1,
            version2=version2,
            differences=differences,
        )
