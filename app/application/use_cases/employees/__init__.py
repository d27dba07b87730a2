"""Employee use cases."""

from app.application.use_cases.employees.employee_operations import EmployeeService

__all__ = [
    "EmployeeService",
]
