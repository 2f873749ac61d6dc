# ghsync/api/routes/health.py
"""Liveness endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ghsync import __version__
from ghsync.api.dependencies import get_runtime
from ghsync.api.models.schemas import HealthResponse
from ghsync.runtime import SyncRuntime

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(runtime: SyncRuntime = Depends(get_runtime)) -> HealthResponse:
    return HealthResponse(
        repository=runtime.config.repository,
        branch=runtime.config.branch,
        version=__version__,
    )
