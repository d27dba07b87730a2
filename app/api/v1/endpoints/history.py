"""Employee history API: list, compare, reconcile, and single-record lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from app.api.v1.dependencies import (
    get_history_query_service,
    get_history_reconciler,
    get_provenance,
    get_version_comparator,
    valid_employee_id,
    valid_history_id,
)
from app.application.use_cases.history import (
    HistoryQueryService,
    HistoryReconciler,
    VersionComparator,
)
from app.core.config import get_settings
from app.core.limiter import limit_writes
from app.domain.exceptions import ValidationException
from app.domain.value_objects.provenance import Provenance
from app.schemas.history import (
    HistoryListResponse,
    HistoryRecordResponse,
    ReconcileResponse,
    VersionComparisonResponse,
)
from app.shared.utils.generators import is_valid_cuid

# Mounted under /employees: /employees/{employee_id}/history...
employee_history_router = APIRouter()
# Mounted under /history: /history/{history_id}
router = APIRouter()


@employee_history_router.get(
    "/{employee_id}/history", response_model=HistoryListResponse
)
async def list_employee_history(
    employee_id: Annotated[str, Depends(valid_employee_id)],
    query_svc: Annotated[HistoryQueryService, Depends(get_history_query_service)],
    page: Annotated[int, Query()] = 1,
    limit: Annotated[int | None, Query()] = None,
):
    """Paginated history for one employee, newest first. Deleted employees included."""
    history_page = await query_svc.list_history(
        employee_id,
        page=page,
        limit=limit if limit is not None else get_settings().history_page_size_default,
    )
    return HistoryListResponse.from_page(history_page)


@employee_history_router.get(
    "/{employee_id}/history/compare", response_model=VersionComparisonResponse
)
async def compare_versions(
    employee_id: Annotated[str, Depends(valid_employee_id)],
    comparator: Annotated[VersionComparator, Depends(get_version_comparator)],
    version_id1: Annotated[str | None, Query(alias="versionId1")] = None,
    version_id2: Annotated[str | None, Query(alias="versionId2")] = None,
):
    """Compare two versions of the employee over the tracked fields."""
    if not version_id1 or not version_id2:
        raise ValidationException(
            "Both versionId1 and versionId2 are required",
            field="versionId1" if not version_id1 else "versionId2",
        )
    for field, value in (("versionId1", version_id1), ("versionId2", version_id2)):
        if not is_valid_cuid(value):
            raise ValidationException(f"Invalid {field} format", field=field)
    comparison = await comparator.compare(employee_id, version_id1, version_id2)
    return VersionComparisonResponse.from_comparison(comparison)


@employee_history_router.post(
    "/{employee_id}/history/reconcile", response_model=ReconcileResponse
)
@limit_writes
async def reconcile_history(
    request: Request,
    employee_id: Annotated[str, Depends(valid_employee_id)],
    provenance: Annotated[Provenance, Depends(get_provenance)],
    reconciler: Annotated[HistoryReconciler, Depends(get_history_reconciler)],
):
    """Append the history record missing after a failed two-phase write, if any."""
    result = await reconciler.reconcile(employee_id, provenance)
    return ReconcileResponse.from_result(result)


@router.get("/{history_id}", response_model=HistoryRecordResponse)
async def get_history_record(
    history_id: Annotated[str, Depends(valid_history_id)],
    query_svc: Annotated[HistoryQueryService, Depends(get_history_query_service)],
):
    """Full history record including its snapshot."""
    record = await query_svc.get_history_record(history_id)
    return HistoryRecordResponse.from_record(record)
