"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from pathreduce.api import health, measure, reduce

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(reduce.router)
api_router.include_router(measure.router)
