"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from rectgrid import __version__
from rectgrid.engine.registry import get_registry
from rectgrid.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        transforms_registered=get_registry().count,
    )
