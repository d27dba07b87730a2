"""Application services: field differ and history recorder."""

from app.application.services.field_differ import compare_snapshots, deep_equal, diff
from app.application.services.history_recorder import DEFAULT_REASONS, HistoryRecorder

__all__ = [
    "DEFAULT_REASONS",
    "HistoryRecorder",
    "compare_snapshots",
    "deep_equal",
    "diff",
]
