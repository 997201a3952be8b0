"""Liveness route."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from fritter.config import Settings

API_VERSION = "0.1.0"

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Process liveness and build identity."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    environment: str


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Report that the process is up. The database is not touched."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=API_VERSION,
        git_sha=settings.git_sha,
        environment=settings.environment,
    )
