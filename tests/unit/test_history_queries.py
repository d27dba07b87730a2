"""HistoryQueryService, VersionComparator, and HistoryReconciler over in-memory repositories."""

from dataclasses import replace
from unittest.mock import AsyncMock

import pytest

from app.application.dtos.employee import EmployeeCreate, EmployeeUpdate
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.history import (
    HistoryQueryService,
    HistoryReconciler,
    VersionComparator,
)
from app.application.use_cases.history.reconcile_history import RECONCILE_REASON
from app.domain.enums import HistoryOperation
from app.domain.exceptions import (
    InconsistentWriteException,
    ResourceNotFoundException,
    ValidationException,
)


@pytest.fixture
def query_service(history_repo, employee_repo) -> HistoryQueryService:
    return HistoryQueryService(history_repo, employee_repo)


@pytest.fixture
def comparator(history_repo) -> VersionComparator:
    return VersionComparator(history_repo)


@pytest.fixture
def reconciler(employee_repo, history_repo) -> HistoryReconciler:
    return HistoryReconciler(employee_repo, history_repo, HistoryRecorder(history_repo))


@pytest.fixture
async def employee_with_updates(employee_service, new_employee, provenance):
    """Employee with CREATE followed by four salary UPDATEs (five records)."""
    created = await employee_service.create_employee(new_employee, provenance)
    for salary in (51000, 52000, 53000, 54000):
        await employee_service.update_employee(
            created.id, EmployeeUpdate(salary=salary), provenance
        )
    return created


async def test_list_history_newest_first_with_totals(query_service, employee_with_updates) -> None:
    page = await query_service.list_history(employee_with_updates.id, page=1, limit=2)
    assert page.total == 5
    assert page.total_pages == 3
    assert [r.snapshot["salary"] for r in page.records] == [54000, 53000]
    assert page.employee.id == employee_with_updates.id


async def test_list_history_last_partial_page(query_service, employee_with_updates) -> None:
    page = await query_service.list_history(employee_with_updates.id, page=3, limit=2)
    assert [r.operation for r in page.records] == [HistoryOperation.CREATE]


async def test_list_history_past_last_page_is_empty(query_service, employee_with_updates) -> None:
    page = await query_service.list_history(employee_with_updates.id, page=10, limit=2)
    assert page.records == []
    assert page.total == 5


async def test_list_history_of_deleted_employee(
    query_service, employee_service, employee_with_updates, provenance
) -> None:
    await employee_service.delete_employee(employee_with_updates.id, provenance)
    page = await query_service.list_history(employee_with_updates.id)
    assert page.total == 6
    assert page.records[0].operation == HistoryOperation.DELETE


async def test_list_history_unknown_employee(query_service) -> None:
    with pytest.raises(ResourceNotFoundException):
        await query_service.list_history("ckmissing000000000000001")


@pytest.mark.parametrize(("page", "limit"), [(0, 20), (1, 0), (1, 101)])
async def test_list_history_rejects_bad_pagination(
    query_service, employee_with_updates, page, limit
) -> None:
    with pytest.raises(ValidationException):
        await query_service.list_history(employee_with_updates.id, page=page, limit=limit)


async def test_get_history_record(query_service, history_repo, employee_with_updates) -> None:
    record = history_repo.records[0]
    found = await query_service.get_history_record(record.id)
    assert found == record
    with pytest.raises(ResourceNotFoundException):
        await query_service.get_history_record("ckmissing000000000000001")


async def test_compare_versions(comparator, history_repo, employee_with_updates) -> None:
    create, first_update = history_repo.records[0], history_repo.records[1]
    result = await comparator.compare(employee_with_updates.id, create.id, first_update.id)
    assert [d.to_dict() for d in result.differences] == [
        {"field": "salary", "version1_value": 50000, "version2_value": 51000}
    ]
    assert result.version1.id == create.id
    assert result.version2.id == first_update.id


async def test_compare_version_with_itself(comparator, history_repo, employee_with_updates) -> None:
    record = history_repo.records[2]
    result = await comparator.compare(employee_with_updates.id, record.id, record.id)
    assert result.differences == []


async def test_compare_is_symmetric(comparator, history_repo, employee_with_updates) -> None:
    a, b = history_repo.records[0].id, history_repo.records[4].id
    forward = await comparator.compare(employee_with_updates.id, a, b)
    backward = await comparator.compare(employee_with_updates.id, b, a)
    assert [(d.field, d.version1_value, d.version2_value) for d in forward.differences] == [
        (d.field, d.version2_value, d.version1_value) for d in backward.differences
    ]


async def test_compare_rejects_version_of_other_employee(
    comparator, employee_service, history_repo, new_employee, provenance, employee_with_updates
) -> None:
    other = await employee_service.create_employee(
        EmployeeCreate(
            full_name="Grace Hopper",
            email="grace@example.com",
            phone_number="555-987-6543",
            department=new_employee.department,
            designation="Admiral",
            salary=1,
            date_of_joining=new_employee.date_of_joining,
        ),
        provenance,
    )
    mine = history_repo.records[0].id
    theirs = (await history_repo.get_latest_for_employee(other.id)).id
    with pytest.raises(ResourceNotFoundException):
        await comparator.compare(employee_with_updates.id, mine, theirs)


async def test_compare_refuses_pair_not_owned_by_employee(
    history_repo, employee_with_updates
) -> None:
    mine = history_repo.records[0]
    foreign = replace(history_repo.records[1], employee_ref="ckother000000000000000001")
    store = AsyncMock()
    store.get_two_for_employee = AsyncMock(return_value=(mine, foreign))
    with pytest.raises(ResourceNotFoundException):
        await VersionComparator(store).compare(employee_with_updates.id, mine.id, foreign.id)


async def test_compare_unknown_version(comparator, history_repo, employee_with_updates) -> None:
    with pytest.raises(ResourceNotFoundException):
        await comparator.compare(
            employee_with_updates.id, history_repo.records[0].id, "ckmissing000000000000001"
        )


async def test_reconcile_consistent_trail_is_noop(
    reconciler, history_repo, employee_with_updates, provenance
) -> None:
    result = await reconciler.reconcile(employee_with_updates.id, provenance)
    assert result.repaired is False
    assert len(history_repo.records) == 5


async def test_reconcile_after_failed_update_appends_missing_update(
    reconciler, employee_service, history_repo, employee_with_updates, provenance
) -> None:
    history_repo.fail_appends = True
    with pytest.raises(InconsistentWriteException):
        await employee_service.update_employee(
            employee_with_updates.id, EmployeeUpdate(designation="Lead"), provenance
        )
    history_repo.fail_appends = False

    result = await reconciler.reconcile(employee_with_updates.id, provenance)
    assert result.repaired is True
    assert result.record.operation == HistoryOperation.UPDATE
    assert [c.field for c in result.record.changes] == ["designation"]
    assert result.record.change_reason == RECONCILE_REASON
    again = await reconciler.reconcile(employee_with_updates.id, provenance)
    assert again.repaired is False


async def test_reconcile_after_failed_create_appends_create(
    reconciler, employee_service, employee_repo, history_repo, new_employee, provenance
) -> None:
    history_repo.fail_appends = True
    with pytest.raises(InconsistentWriteException) as exc_info:
        await employee_service.create_employee(new_employee, provenance)
    history_repo.fail_appends = False

    employee_id = exc_info.value.details["employee_id"]
    result = await reconciler.reconcile(employee_id, provenance)
    assert result.record.operation == HistoryOperation.CREATE
    assert result.record.changes == ()


async def test_reconcile_after_failed_delete_appends_delete(
    reconciler, employee_service, history_repo, employee_with_updates, provenance
) -> None:
    history_repo.fail_appends = True
    with pytest.raises(InconsistentWriteException):
        await employee_service.delete_employee(employee_with_updates.id, provenance)
    history_repo.fail_appends = False

    result = await reconciler.reconcile(employee_with_updates.id, provenance)
    assert result.record.operation == HistoryOperation.DELETE
    assert result.record.snapshot["is_deleted"] is True


async def test_reconcile_unknown_employee(reconciler, provenance) -> None:
    with pytest.raises(ResourceNotFoundException):
        await reconciler.reconcile("ckmissing000000000000001", provenance)
