"""Pytest configuration and fixtures for staff-records.

HTTP tests run app.main:app over httpx ASGITransport with the repository
dependencies replaced by in-memory fakes, so they need no database.
Repository integration tests use db_session and are marked requires_db.
"""

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.v1.dependencies import get_employee_repo, get_history_repo
from app.application.dtos.employee import EmployeeCreate
from app.application.services.history_recorder import HistoryRecorder
from app.application.use_cases.employees import EmployeeService
from app.core.limiter import limiter
from app.domain.enums import Department
from app.domain.value_objects.provenance import Provenance
from app.infrastructure.persistence import database
from app.main import app
from tests.fakes import InMemoryEmployeeRepository, InMemoryHistoryRepository


@pytest.fixture
def employee_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def history_repo() -> InMemoryHistoryRepository:
    return InMemoryHistoryRepository()


@pytest.fixture
def employee_service(
    employee_repo: InMemoryEmployeeRepository,
    history_repo: InMemoryHistoryRepository,
) -> EmployeeService:
    return EmployeeService(employee_repo, HistoryRecorder(history_repo))


@pytest.fixture
def provenance() -> Provenance:
    return Provenance(changed_by="hr-admin@example.com")


@pytest.fixture
def new_employee() -> EmployeeCreate:
    return EmployeeCreate(
        full_name="Ada Lovelace",
        email="ada@example.com",
        phone_number="555-123-4567",
        department=Department.ENGINEERING,
        designation="Engineer",
        salary=50000,
        date_of_joining=date(2024, 1, 15),
    )


@pytest.fixture
def employee_payload() -> dict:
    """camelCase POST /employees body."""
    return {
        "fullName": "Ada Lovelace",
        "email": "Ada@Example.com",
        "phoneNumber": "555-123-4567",
        "department": "Engineering",
        "designation": "Engineer",
        "salary": 50000,
        "dateOfJoining": "2024-01-15",
    }


@pytest.fixture
async def client(
    employee_repo: InMemoryEmployeeRepository,
    history_repo: InMemoryHistoryRepository,
) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI) backed by in-memory repositories."""
    app.dependency_overrides[get_employee_repo] = lambda: employee_repo
    app.dependency_overrides[get_history_repo] = lambda: history_repo
    limiter.reset()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def db_session():
    """Database session for repository integration tests.

    Skips when DATABASE_URL is not configured. Repositories commit their own
    writes, so tests use unique emails/phones instead of relying on rollback.
    Run without a database via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
