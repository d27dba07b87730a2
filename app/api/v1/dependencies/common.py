"""Request-scoped values read at the HTTP boundary: provenance and path IDs."""

from fastapi import Request

from app.core.config import get_settings
from app.domain.exceptions import ValidationException
from app.domain.value_objects.provenance import Provenance
from app.shared.utils.generators import is_valid_cuid


def get_provenance(request: Request) -> Provenance:
    """Build provenance from X-Changed-By / X-Change-Reason.

    The configured default actor is applied here when the header is absent;
    nothing below the HTTP layer defaults changed_by.
    """
    settings = get_settings()
    changed_by = (request.headers.get(settings.changed_by_header) or "").strip()
    reason = (request.headers.get(settings.change_reason_header) or "").strip()
    return Provenance(
        changed_by=changed_by or settings.default_changed_by,
        change_reason=reason or None,
    )


def _require_id(value: str, field: str) -> str:
    if not is_valid_cuid(value):
        raise ValidationException(f"Invalid {field} format", field=field)
    return value


def valid_employee_id(employee_id: str) -> str:
    """Path parameter employee_id, rejected with 400 when malformed."""
    return _require_id(employee_id, "employee_id")


def valid_history_id(history_id: str) -> str:
    """Path parameter history_id, rejected with 400 when malformed."""
    return _require_id(history_id, "history_id")
