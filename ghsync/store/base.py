# ghsync/store/base.py
"""Content store contract used by the importers."""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence, runtime_checkable

from ghsync.models.post import Post


@runtime_checkable
class ContentStore(Protocol):
    """
    Protocol for the local content store.

    Implementations raise PersistenceError from save_batch and
    DeletionError from delete_by_path.
    """

    def sha_exists_with_path(self, sha: str, path: str) -> bool:
        """True if a stored post came from blob `sha` at `path`."""
        ...

    def save_batch(self, posts: Sequence[Post], author: str) -> List[int]:
        """Persist all posts or none. Returns the stored ids in order."""
        ...

    def delete_by_path(self, path: str) -> None:
        """Delete the post imported from `path`."""
        ...

    def last_imported_sha(self) -> Optional[str]:
        """Sha of the last fully imported commit, if any."""
        ...

    def mark_imported(self, sha: str) -> None:
        """Record `sha` as the last fully imported commit."""
        ...


__all__ = ["ContentStore"]
