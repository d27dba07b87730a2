"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    DuplicateEmployeeException,
    InconsistentWriteException,
    RecordsException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_records_exception_default_error_code() -> None:
    """Base RecordsException uses class name as error_code when not provided."""
    exc = RecordsException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "RecordsException"
    assert exc.details == {}


def test_records_exception_to_dict() -> None:
    exc = RecordsException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="email")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "email"}
    assert ValidationException("Bad").details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("employee", "abc")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert "employee" in exc.message
    assert exc.details == {"resource_type": "employee", "resource_id": "abc"}


def test_duplicate_employee_exception() -> None:
    assert DuplicateEmployeeException("email").details == {"field": "email"}
    generic = DuplicateEmployeeException()
    assert generic.error_code == "DUPLICATE_EMPLOYEE"
    assert generic.details == {}


def test_inconsistent_write_exception() -> None:
    exc = InconsistentWriteException("emp1", "UPDATE", "OperationalError")
    assert exc.error_code == "INCONSISTENT_WRITE"
    assert exc.details == {
        "employee_id": "emp1",
        "operation": "UPDATE",
        "reason": "OperationalError",
    }
    assert isinstance(exc, RecordsException)


def test_sql_not_configured_exception() -> None:
    assert SqlNotConfiguredException().error_code == "SERVICE_UNAVAILABLE"
