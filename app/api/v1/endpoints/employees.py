"""Employee API: thin routes delegating to EmployeeService."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response

from app.api.v1.dependencies import (
    get_employee_service,
    get_provenance,
    valid_employee_id,
)
from app.application.dtos.employee import EmployeeListQuery
from app.application.use_cases.employees import EmployeeService
from app.core.limiter import limit_writes
from app.domain.value_objects.provenance import Provenance
from app.schemas.base import PaginationResponse
from app.schemas.employee import (
    EmployeeCreateRequest,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeStatsResponse,
    EmployeeUpdateRequest,
)

router = APIRouter()


@router.post("", response_model=EmployeeResponse, status_code=201)
@limit_writes
async def create_employee(
    request: Request,
    body: EmployeeCreateRequest,
    provenance: Annotated[Provenance, Depends(get_provenance)],
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
):
    """Create an employee and record CREATE in its history."""
    created = await employee_svc.create_employee(body.to_dto(), provenance)
    return EmployeeResponse.model_validate(created)


@router.get("", response_model=EmployeeListResponse)
async def list_employees(
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
    page: Annotated[int, Query()] = 1,
    limit: Annotated[int, Query()] = 10,
    search: Annotated[str | None, Query(max_length=100)] = None,
    department: Annotated[str | None, Query()] = None,
    employment_status: Annotated[str | None, Query(alias="employmentStatus")] = None,
    sort_by: Annotated[str, Query(alias="sortBy")] = "created_at",
    sort_order: Annotated[str, Query(alias="sortOrder")] = "desc",
):
    """List active employees with search, filters, sort, and pagination."""
    query = EmployeeListQuery(
        page=page,
        limit=limit,
        search=search or None,
        department=department or None,
        employment_status=employment_status or None,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    items, total = await employee_svc.list_employees(query)
    return EmployeeListResponse(
        data=[EmployeeResponse.model_validate(e) for e in items],
        pagination=PaginationResponse(
            page=page,
            limit=limit,
            total=total,
            total_pages=-(-total // limit),
        ),
    )


@router.get("/stats/overview", response_model=EmployeeStatsResponse)
async def get_employee_stats(
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
):
    """Active/inactive/deleted counts and per-department head count and salary."""
    stats = await employee_svc.get_stats()
    return EmployeeStatsResponse.model_validate(stats)


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(
    employee_id: Annotated[str, Depends(valid_employee_id)],
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
):
    """Get an active employee by id."""
    employee = await employee_svc.get_employee(employee_id)
    return EmployeeResponse.model_validate(employee)


@router.put("/{employee_id}", response_model=EmployeeResponse)
@limit_writes
async def update_employee(
    request: Request,
    employee_id: Annotated[str, Depends(valid_employee_id)],
    body: EmployeeUpdateRequest,
    provenance: Annotated[Provenance, Depends(get_provenance)],
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
):
    """Partially update an employee and record UPDATE with the field-level delta."""
    updated = await employee_svc.update_employee(employee_id, body.to_dto(), provenance)
    return EmployeeResponse.model_validate(updated)


@router.delete("/{employee_id}", status_code=204)
@limit_writes
async def delete_employee(
    request: Request,
    employee_id: Annotated[str, Depends(valid_employee_id)],
    provenance: Annotated[Provenance, Depends(get_provenance)],
    employee_svc: Annotated[EmployeeService, Depends(get_employee_service)],
):
    """Soft-delete an employee and record DELETE. History stays readable."""
    await employee_svc.delete_employee(employee_id, provenance)
    return Response(status_code=204)
