"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from stackit.config import Settings


router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    git_sha: str


class WelcomeResponse(BaseModel):
    """Root endpoint response."""

    message: str


@router.get("/", response_model=WelcomeResponse)
async def root() -> WelcomeResponse:
    """Welcome message for anyone hitting the API root."""
    return WelcomeResponse(message="Welcome to the StackIt API")


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
    )
