"""Shared utilities: datetime and generators."""

from app.shared.utils.datetime import ensure_utc, isoformat_utc, utc_now
from app.shared.utils.generators import (
    generate_cuid,
    generate_employee_display_id,
    is_valid_cuid,
)

__all__ = [
    "generate_cuid",
    "generate_employee_display_id",
    "is_valid_cuid",
    "utc_now",
    "ensure_utc",
    "isoformat_utc",
]
