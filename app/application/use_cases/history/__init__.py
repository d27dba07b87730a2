"""History use cases: queries, version comparison, reconciliation."""

from app.application.use_cases.history.history_queries import (
    DEFAULT_HISTORY_PAGE_SIZE,
    MAX_HISTORY_PAGE_SIZE,
    HistoryQueryService,
)
from app.application.use_cases.history.reconcile_history import HistoryReconciler
from app.application.use_cases.history.version_comparator import VersionComparator

__all__ = [
    "DEFAULT_HISTORY_PAGE_SIZE",
    "MAX_HISTORY_PAGE_SIZE",
    "HistoryQueryService",
    "HistoryReconciler",
    "VersionComparator",
]
