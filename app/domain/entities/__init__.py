"""Domain entities.

Pure domain models; no ORM or persistence concerns.
"""

from app.domain.entities.history_record import HistoryRecord

__all__ = [
    "HistoryRecord",
]
