"""
Health Check Router - Work Value Calculator
work_value/routers/health.py

The engine has no external dependencies, so health is process liveness.
"""
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from work_value.config import get_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=HealthResponse, summary="Service health")
async def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
    )
