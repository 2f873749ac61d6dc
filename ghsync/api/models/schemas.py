# ghsync/api/models/schemas.py
"""Pydantic models for API responses."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One cause of a failed import."""

    code: str = Field(..., description="Machine-readable cause, e.g. delete_failed")
    message: str = Field(..., description="Human-readable description")


class WebhookResponse(BaseModel):
    """Outcome of a webhook delivery."""

    status: str = Field(..., description="processed, ignored, synced or pong")
    message: Optional[str] = Field(None, description="Result or reason")
    errors: List[ErrorDetail] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    repository: str
    branch: str
    version: str
