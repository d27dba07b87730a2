"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from app.core.config import get_settings
from app.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    settings = get_settings()
    return HealthResponse(service=settings.app_name, version=settings.app_version)
