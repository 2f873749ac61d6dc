# ghsync/models/payload.py
"""
Push payloads as delivered by GitHub webhooks.

Only the fields the importer needs are modelled; everything else in the
webhook body is ignored.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

NULL_SHA = "0" * 40
BRANCH_PREFIX = "refs/heads/"


class PayloadCommit(BaseModel):
    """One commit listed in a push."""

    model_config = ConfigDict(extra="ignore")

    id: str
    message: str = ""
    added: List[str] = Field(default_factory=list)
    removed: List[str] = Field(default_factory=list)
    modified: List[str] = Field(default_factory=list)


class PayloadRepository(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str = ""


class Payload(BaseModel):
    """A push event: the head commit plus every commit pushed."""

    model_config = ConfigDict(extra="ignore")

    ref: str = ""
    after: str = ""
    commits: List[PayloadCommit] = Field(default_factory=list)
    head_commit: Optional[PayloadCommit] = None
    repository: Optional[PayloadRepository] = None

    def get_commit_id(self) -> str:
        """Id of the commit the push moved the branch to."""
        if self.head_commit is not None:
            return self.head_commit.id
        return self.after

    def get_commits(self) -> List[PayloadCommit]:
        return list(self.commits)

    @property
    def branch(self) -> str:
        if self.ref.startswith(BRANCH_PREFIX):
            return self.ref[len(BRANCH_PREFIX):]
        return self.ref

    @property
    def repository_name(self) -> str:
        return self.repository.full_name if self.repository else ""

    def removed_paths(self) -> List[str]:
        """Paths removed by any commit, deduplicated in first-seen order."""
        return list(dict.fromkeys(path for commit in self.commits for path in commit.removed))

    def is_deletion(self) -> bool:
        """True when the push deleted the branch."""
        return self.after == NULL_SHA

    def is_for_branch(self, branch: str) -> bool:
        return self.ref == f"{BRANCH_PREFIX}{branch}"


__all__ = ["Payload", "PayloadCommit", "PayloadRepository", "NULL_SHA"]
