"""Health check endpoints."""

from fastapi import APIRouter

from transcript_trim.api.v1.schemas import HealthStatus
from transcript_trim.config import settings

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthStatus)
def health_check() -> HealthStatus:
    """Health check endpoint for load balancers and monitoring."""
    return HealthStatus(
        status="healthy",
        service="transcript-trim-api",
        version=settings.api_version,
        settings={
            "default_pricing_model": settings.default_pricing_model.value,
            "max_file_size_mb": str(settings.max_file_size_mb),
            "allowed_extensions": ", ".join(settings.allowed_extensions),
        },
    )
