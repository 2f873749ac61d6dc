# ghsync/remote/base.py
"""Contracts between the importers and the remote repository."""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ghsync.models.commit import Commit


@runtime_checkable
class CommitFetcher(Protocol):
    """
    Protocol for resolving commits from the remote.

    Both methods raise FetchError when the commit cannot be resolved.
    """

    def fetch_commit(self, sha: str) -> Commit:
        """Resolve a commit and its full tree."""
        ...

    def fetch_master(self) -> Commit:
        """Resolve the current head of the configured branch."""
        ...


@runtime_checkable
class SyncStateReader(Protocol):
    """Tells the fetcher which commit was imported last."""

    def last_imported_sha(self) -> Optional[str]:
        ...


__all__ = ["CommitFetcher", "SyncStateReader"]
