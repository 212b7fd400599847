"""
Health check endpoint
"""
import time
from datetime import datetime, timezone
from fastapi import APIRouter
from pydantic import BaseModel, Field

from zendesk_connector import __version__

router = APIRouter(prefix="/api/health", tags=["health"])

# Application start time for uptime calculation
APP_START_TIME = time.time()


class HealthResponse(BaseModel):
    """Basic health check response"""
    status: str = Field(..., description="Overall status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(..., description="Application version")
    uptime_seconds: float = Field(..., description="Application uptime in seconds")


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic liveness check"""
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=time.time() - APP_START_TIME
    )
