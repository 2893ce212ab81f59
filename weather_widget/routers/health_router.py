"""Health endpoints."""

from fastapi import APIRouter

from weather_widget import __version__
from weather_widget.models import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check endpoint."""
    return HealthResponse(status="ok", version=__version__)
