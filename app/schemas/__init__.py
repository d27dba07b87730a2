"""Pydantic request/response schemas for the API."""

from app.schemas.base import CamelModel, PaginationResponse
from app.schemas.employee import (
    DepartmentStatsResponse,
    EmployeeCreateRequest,
    EmployeeListResponse,
    EmployeeResponse,
    EmployeeStatsResponse,
    EmployeeUpdateRequest,
)
from app.schemas.health import HealthResponse
from app.schemas.history import (
    FieldChangeResponse,
    FieldDifferenceResponse,
    HistoryEmployeeSummary,
    HistoryEntryResponse,
    HistoryListResponse,
    HistoryRecordResponse,
    ReconcileResponse,
    VersionComparisonResponse,
    VersionResponse,
)

__all__ = [
    "CamelModel",
    "PaginationResponse",
    "DepartmentStatsResponse",
    "EmployeeCreateRequest",
    "EmployeeListResponse",
    "EmployeeResponse",
    "EmployeeStatsResponse",
    "EmployeeUpdateRequest",
    "HealthResponse",
    "FieldChangeResponse",
    "FieldDifferenceResponse",
    "HistoryEmployeeSummary",
    "HistoryEntryResponse",
    "HistoryListResponse",
    "HistoryRecordResponse",
    "ReconcileResponse",
    "VersionComparisonResponse",
    "VersionResponse",
]
