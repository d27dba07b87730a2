"""Presentation-layer dependency injection (composition root).

Routes depend only on these providers, never on infrastructure directly.
Tests replace get_employee_repo / get_history_repo through
app.dependency_overrides.
"""

from .common import get_provenance, valid_employee_id, valid_history_id
from .db import get_employee_repo, get_history_repo
from .employee import get_employee_service, get_history_recorder
from .history import (
    get_history_query_service,
    get_history_reconciler,
    get_version_comparator,
)

__all__ = [
    "get_employee_repo",
    "get_employee_service",
    "get_history_query_service",
    "get_history_reconciler",
    "get_history_recorder",
    "get_history_repo",
    "get_provenance",
    "get_version_comparator",
    "valid_employee_id",
    "valid_history_id",
]
