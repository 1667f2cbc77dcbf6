"""
Health Router - GET /api/health

Liveness probe. No side effects and no dependency checks; always 200.
"""

from fastapi import APIRouter, Depends

from src.api.deps import get_settings
from src.core.config import Settings
from src.models.responses import HealthResponse

router = APIRouter(prefix="/api", tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """Report that the service is up."""
    return HealthResponse(status="OK", service=settings.service_name)
