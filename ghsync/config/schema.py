# ghsync/config/schema.py
"""
Configuration schema for ghsync.

Example YAML:
    repository: octocat/blog
    branch: master
    token: ghp_xxx            # or GHSYNC_TOKEN in the environment
    database: .ghsync/content.db
    markdown_extensions: [md, markdown]
    exclude_paths:
      - "_drafts/*"
    exclude_extensions: [txt]
    webhook_secret: s3cret
    notify_url: https://example.com/hooks/new-posts
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

TOKEN_ENV = "GHSYNC_TOKEN"

_REPOSITORY_RE = re.compile(r"^[\w.-]+/[\w.-]+$")


class SyncConfig(BaseModel):
    """Settings for one synchronized repository."""

    model_config = ConfigDict(extra="forbid")

    repository: str = Field(..., description="Repository as owner/name")
    branch: str = Field(default="master", description="Branch imported by import-master and pushes")
    api_url: str = Field(default="https://api.github.com", description="GitHub REST API base URL")
    token: Optional[str] = Field(default=None, description=f"API token (falls back to ${TOKEN_ENV})")
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    database: Optional[Path] = Field(default=None, description="SQLite content store path")
    markdown_extensions: List[str] = Field(
        default_factory=lambda: ["md", "markdown"],
        description="Extensions handled by the front-matter document processor",
    )
    exclude_paths: List[str] = Field(default_factory=list, description="fnmatch patterns never imported")
    exclude_extensions: List[str] = Field(default_factory=list, description="Extensions never imported")
    webhook_secret: Optional[str] = Field(default=None, description="Secret for X-Hub-Signature-256")
    notify_url: Optional[str] = Field(default=None, description="Endpoint notified of new posts")

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str) -> str:
        if not _REPOSITORY_RE.match(v):
            raise ValueError(f"repository must look like 'owner/name', got {v!r}")
        return v

    @field_validator("markdown_extensions", "exclude_extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v):
        """Store extensions lowercase without the leading dot."""
        if not isinstance(v, list):
            return v
        return [str(ext).lower().lstrip(".") for ext in v]

    @model_validator(mode="after")
    def token_from_environment(self) -> "SyncConfig":
        if self.token is None:
            self.token = os.environ.get(TOKEN_ENV) or None
        return self


__all__ = ["SyncConfig", "TOKEN_ENV"]
