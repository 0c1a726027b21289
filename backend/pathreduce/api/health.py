"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from pathreduce import __version__
from pathreduce.engine.instructions import INSTRUCTION_TYPES
from pathreduce.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        instruction_kinds=len(INSTRUCTION_TYPES),
    )
