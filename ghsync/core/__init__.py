# ghsync/core/__init__.py
"""
Core contracts shared by every ghsync component: errors, hooks, paths,
configuration loading and the HTTP client factory.
"""

from ghsync.core.errors import (
    AlreadySyncedError,
    DeletionError,
    FetchError,
    NotificationError,
    PersistenceError,
    SyncError,
)
from ghsync.core.hooks import HookRegistry

__all__ = [
    "SyncError",
    "FetchError",
    "AlreadySyncedError",
    "PersistenceError",
    "NotificationError",
    "DeletionError",
    "HookRegistry",
]
