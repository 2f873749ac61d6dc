# ghsync/models/commit.py
"""Commit and tree snapshots resolved from the remote repository."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Tuple

from ghsync.models.blob import Blob


@dataclass(frozen=True)
class Tree:
    """Ordered blobs of one commit."""

    sha: str
    entries: Tuple[Blob, ...] = field(default_factory=tuple)
    truncated: bool = False

    def blobs(self) -> Iterator[Blob]:
        """Blobs in enumeration order."""
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Commit:
    """
    A point-in-time snapshot of the repository.

    `synced` is set by the fetcher when this commit is the last one the
    store imported.
    """

    sha: str
    tree: Tree
    message: str = ""
    author_name: str = ""
    author_email: str = ""
    synced: bool = False

    def already_synced(self) -> bool:
        return self.synced

    @property
    def author_identity(self) -> str:
        """Identity the imported batch is attributed to."""
        return self.author_email or self.author_name

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


__all__ = ["Tree", "Commit"]
