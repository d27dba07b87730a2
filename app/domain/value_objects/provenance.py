"""Provenance value object: who made a change and why."""

from dataclasses import dataclass

from app.domain.exceptions import ValidationException

MAX_CHANGED_BY_LENGTH = 255
MAX_CHANGE_REASON_LENGTH = 1000


@dataclass(frozen=True)
class Provenance:
    """Caller-supplied provenance threaded through every mutation.

    changed_by is required; change_reason may be None, in which case the
    use case supplies an operation-specific reason.
    """

    changed_by: str
    change_reason: str | None = None

    def __post_init__(self) -> None:
        if not self.changed_by or not self.changed_by.strip():
            raise ValidationException("changed_by must be a non-empty string", field="changed_by")
        if len(self.changed_by) > MAX_CHANGED_BY_LENGTH:
            raise ValidationException(
                f"changed_by must not exceed {MAX_CHANGED_BY_LENGTH} characters",
                field="changed_by",
            )
        if self.change_reason is not None and len(self.change_reason) > MAX_CHANGE_REASON_LENGTH:
            raise ValidationException(
                f"change_reason must not exceed {MAX_CHANGE_REASON_LENGTH} characters",
                field="change_reason",
            )

    def reason_or(self, default: str) -> str:
        """Return the supplied reason, or default when none was given."""
        return self.change_reason if self.change_reason else default
