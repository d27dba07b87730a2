"""EmployeeService: every mutation is followed by exactly one history record."""

from unittest.mock import AsyncMock

import pytest

from app.application.dtos.employee import EmployeeCreate, EmployeeListQuery, EmployeeUpdate
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.employees import EmployeeService
from app.domain.enums import Department, EmploymentStatus, HistoryOperation
from app.domain.exceptions import (
    DuplicateEmployeeException,
    InconsistentWriteException,
    ResourceNotFoundException,
    ValidationException,
)
from app.domain.value_objects import Provenance
from tests.fakes import InMemoryEmployeeRepository


async def test_create_records_create_with_full_snapshot(
    employee_service, history_repo, new_employee, provenance
) -> None:
    created = await employee_service.create_employee(new_employee, provenance)
    records, total = await history_repo.list_by_employee(created.id, 1, 20)
    assert total == 1
    record = records[0]
    assert record.operation == HistoryOperation.CREATE
    assert record.changes == ()
    assert record.changed_by == "hr-admin@example.com"
    assert record.change_reason == "Employee record created"
    assert record.employee_display_id == created.employee_id
    assert record.snapshot["full_name"] == "Ada Lovelace"
    assert record.snapshot["salary"] == 50000
    assert record.snapshot["date_of_joining"] == "2024-01-15"
    assert record.snapshot["is_deleted"] is False


async def test_update_records_only_changed_fields(
    employee_service, history_repo, new_employee, provenance
) -> None:
    created = await employee_service.create_employee(new_employee, provenance)
    updated = await employee_service.update_employee(
        created.id,
        EmployeeUpdate(salary=60000, department=Department.ENGINEERING),
        provenance,
    )
    assert updated.salary == 60000
    records, total = await history_repo.list_by_employee(created.id, 1, 20)
    assert total == 2
    latest = records[0]
    assert latest.operation == HistoryOperation.UPDATE
    assert [c.to_dict() for c in latest.changes] == [
        {"field": "salary", "old_value": 50000, "new_value": 60000}
    ]


async def test_noop_update_records_empty_changes(
    employee_service, history_repo, new_employee, provenance
) -> None:
    created = await employee_service.create_employee(new_employee, provenance)
    await employee_service.update_employee(
        created.id, EmployeeUpdate(full_name="Ada Lovelace"), provenance
    )
    latest = await history_repo.get_latest_for_employee(created.id)
    assert latest.operation == HistoryOperation.UPDATE
    assert latest.changes == ()


async def test_delete_hides_employee_but_keeps_history(
    employee_service, history_repo, new_employee, provenance
) -> None:
    created = await employee_service.create_employee(new_employee, provenance)
    await employee_service.update_employee(created.id, EmployeeUpdate(salary=60000), provenance)
    await employee_service.delete_employee(created.id, Provenance("alice", "Left company"))

    with pytest.raises(ResourceNotFoundException):
        await employee_service.get_employee(created.id)

    records, total = await history_repo.list_by_employee(created.id, 1, 20)
    assert total == 3
    assert [r.operation for r in records] == [
        HistoryOperation.DELETE,
        HistoryOperation.UPDATE,
        HistoryOperation.CREATE,
    ]
    delete = records[0]
    assert delete.changes == ()
    assert delete.change_reason == "Left company"
    assert delete.snapshot["is_deleted"] is True
    assert delete.snapshot["employment_status"] == "Inactive"


async def test_mutations_on_missing_employee_raise_not_found(
    employee_service, history_repo, provenance
) -> None:
    missing = "ckmissing000000000000001"
    with pytest.raises(ResourceNotFoundException):
        await employee_service.update_employee(missing, EmployeeUpdate(salary=1), provenance)
    with pytest.raises(ResourceNotFoundException):
        await employee_service.delete_employee(missing, provenance)
    assert history_repo.records == []


async def test_deleted_employee_cannot_be_updated(
    employee_service, new_employee, provenance
) -> None:
    created = await employee_service.create_employee(new_employee, provenance)
    await employee_service.delete_employee(created.id, provenance)
    with pytest.raises(ResourceNotFoundException):
        await employee_service.update_employee(created.id, EmployeeUpdate(salary=1), provenance)


async def test_history_failure_leaves_employee_saved(
    employee_service, employee_repo, history_repo, new_employee, provenance
) -> None:
    history_repo.fail_appends = True
    with pytest.raises(InconsistentWriteException) as exc_info:
        await employee_service.create_employee(new_employee, provenance)
    assert exc_info.value.details["operation"] == "CREATE"
    employee_id = exc_info.value.details["employee_id"]
    assert await employee_repo.get_active_by_id(employee_id) is not None
    assert history_repo.records == []


async def test_duplicate_email_is_rejected(
    employee_service, history_repo, new_employee, provenance
) -> None:
    await employee_service.create_employee(new_employee, provenance)
    with pytest.raises(DuplicateEmployeeException) as exc_info:
        await employee_service.create_employee(new_employee, provenance)
    assert exc_info.value.details == {"field": "email"}
    assert len(history_repo.records) == 1


async def test_list_employees_filters_and_paginates(
    employee_service, new_employee, provenance
) -> None:
    for i in range(3):
        await employee_service.create_employee(
            EmployeeCreate(
                full_name=f"Person {i}",
                email=f"person{i}@example.com",
                phone_number=f"555-123-000{i}",
                department=Department.SALES if i else Department.IT,
                designation="Rep",
                salary=1000 * (i + 1),
                date_of_joining=new_employee.date_of_joining,
            ),
            provenance,
        )
    items, total = await employee_service.list_employees(
        EmployeeListQuery(department="Sales", sort_by="salary", sort_order="asc", limit=1)
    )
    assert total == 2
    assert [e.full_name for e in items] == ["Person 1"]


@pytest.mark.parametrize(
    "query",
    [
        EmployeeListQuery(page=0),
        EmployeeListQuery(limit=0),
        EmployeeListQuery(limit=101),
        EmployeeListQuery(sort_by="password"),
        EmployeeListQuery(sort_order="sideways"),
    ],
)
async def test_list_employees_rejects_bad_query(employee_service, query) -> None:
    with pytest.raises(ValidationException):
        await employee_service.list_employees(query)


async def test_stats(employee_service, new_employee, provenance) -> None:
    first = await employee_service.create_employee(new_employee, provenance)
    second = await employee_service.create_employee(
        EmployeeCreate(
            full_name="Grace Hopper",
            email="grace@example.com",
            phone_number="555-987-6543",
            department=Department.ENGINEERING,
            designation="Admiral",
            salary=70000,
            date_of_joining=new_employee.date_of_joining,
            employment_status=EmploymentStatus.INACTIVE,
        ),
        provenance,
    )
    await employee_service.delete_employee(first.id, provenance)
    stats = await employee_service.get_stats()
    assert stats.total_active == 0
    assert stats.total_inactive == 1
    assert stats.total_deleted == 1
    assert stats.total_employees == 1
    assert [(d.department, d.count, d.avg_salary) for d in stats.department_stats] == [
        ("Engineering", 1, 70000)
    ]
    assert second.employment_status == "Inactive"


async def test_service_with_recorder_over_mock(new_employee, provenance) -> None:
    """Service calls the recorder once per mutation with before/after snapshots."""
    recorder = AsyncMock(spec=HistoryRecorder)
    svc = EmployeeService(InMemoryEmployeeRepository(), recorder)
    created = await svc.create_employee(new_employee, provenance)
    await svc.update_employee(created.id, EmployeeUpdate(salary=1), provenance)
    assert recorder.record.await_count == 2
    update_call = recorder.record.await_args_list[1].kwargs
    assert update_call["operation"] == HistoryOperation.UPDATE
    assert update_call["before"]["salary"] == 50000
    assert update_call["after"]["salary"] == 1
