"""Domain exceptions for the employee records service.

Defines domain-level exceptions that represent business rule violations
and audit-trail failures. These exceptions are independent of
infrastructure concerns. Presentation layer maps them to HTTP responses
in exception handlers.
"""

from typing import Any


class RecordsException(Exception):
    """Base exception for all records-service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the HTTP layer."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(RecordsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or parameter that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(RecordsException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'employee', 'history').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateEmployeeException(RecordsException):
    """Raised when an email or phone number is already used by another employee."""

    def __init__(self, field: str | None = None) -> None:
        """Initialize with the clashing field, when known.

        Args:
            field: 'email' or 'phone_number'; None when the constraint is unknown.
        """
        message = (
            f"An employee with this {field} already exists"
            if field
            else "An employee with this email or phone number already exists"
        )
        details = {"field": field} if field else {}
        super().__init__(message, "DUPLICATE_EMPLOYEE", details)


class InconsistentWriteException(RecordsException):
    """Raised when the employee write committed but its history record did not.

    The audit trail for the employee may be incomplete; operators reconcile
    with POST /employees/{id}/history/reconcile.
    """

    def __init__(self, employee_id: str, operation: str, reason: str) -> None:
        """Initialize with the affected employee, operation, and failure reason.

        Args:
            employee_id: Employee whose state changed without a history record.
            operation: History operation that failed to persist (CREATE/UPDATE/DELETE).
            reason: Short description of the underlying failure.
        """
        super().__init__(
            f"Employee {employee_id} was saved but its {operation} history record was not",
            "INCONSISTENT_WRITE",
            {"employee_id": employee_id, "operation": operation, "reason": reason},
        )


class SqlNotConfiguredException(RecordsException):
    """Raised when an operation requires Postgres but DATABASE_URL is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
