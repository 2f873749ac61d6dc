# ghsync/core/errors.py
"""
All synchronization errors for ghsync.

Hierarchy:
    SyncError
    ├── FetchError - remote commit/tree/blob resolution failed
    ├── AlreadySyncedError - commit was already imported (benign)
    ├── PersistenceError - batch save failed
    ├── NotificationError - post-persistence notification failed
    └── DeletionError - one or more path deletions failed

A SyncError carries an ordered list of (code, message) pairs so several
failures can be reported as one value. The first pair is the primary cause.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

# Causes callers treat as a no-op rather than a failure.
BENIGN_CODES = frozenset({"commit_synced"})


class SyncError(Exception):
    """Base error for synchronization failures."""

    default_code = "sync_error"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self._errors: List[Tuple[str, str]] = [(code or self.default_code, message)]

    @property
    def code(self) -> str:
        """Code of the primary cause."""
        return self._errors[0][0]

    @property
    def message(self) -> str:
        """Message of the primary cause."""
        return self._errors[0][1]

    @property
    def errors(self) -> List[Tuple[str, str]]:
        """All (code, message) pairs in the order they were added."""
        return list(self._errors)

    @property
    def benign(self) -> bool:
        """True when every cause is an expected no-op."""
        return all(code in BENIGN_CODES for code in self.codes)

    @property
    def codes(self) -> List[str]:
        return [code for code, _ in self._errors]

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self._errors]

    def add(self, code: str, message: str) -> None:
        """Attach another cause to this error."""
        self._errors.append((code, message))

    def merge(self, other: "SyncError") -> "SyncError":
        """Attach every cause of another error and return self."""
        for code, message in other.errors:
            self.add(code, message)
        return self

    def __str__(self) -> str:
        if len(self._errors) == 1:
            return self.message
        return "; ".join(f"{code}: {message}" for code, message in self._errors)


class FetchError(SyncError):
    """Remote commit, tree or blob could not be resolved."""

    default_code = "fetch_failed"


class AlreadySyncedError(SyncError):
    """The commit was already imported; callers treat this as a no-op."""

    default_code = "commit_synced"

    def __init__(self, message: str = "Already synced this commit.", code: Optional[str] = None):
        super().__init__(message, code)


class PersistenceError(SyncError):
    """The batch of posts could not be saved."""

    default_code = "save_failed"


class NotificationError(SyncError):
    """New posts were saved but the export notification failed."""

    default_code = "notify_failed"


class DeletionError(SyncError):
    """Deleting content by path failed."""

    default_code = "delete_failed"


__all__ = [
    "BENIGN_CODES",
    "SyncError",
    "FetchError",
    "AlreadySyncedError",
    "PersistenceError",
    "NotificationError",
    "DeletionError",
]
