# ghsync/importer/detector.py
"""
Change detection against the content store.

A blob is unchanged when the store already holds a post imported from the
same sha at the same path. That lookup is authoritative: the
`blob_changed` extension point observes positive results but cannot turn
them into skips. A renamed file (same sha, new path) counts as changed.
"""

from __future__ import annotations

from ghsync.core import hooks as hook_names
from ghsync.core.hooks import HookRegistry
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.blob import Blob
from ghsync.store.base import ContentStore

logger = get_logger(__name__)


class ChangeDetector:
    def __init__(self, store: ContentStore, hooks: HookRegistry) -> None:
        self._store = store
        self._hooks = hooks

    def has_changed(self, blob: Blob) -> bool:
        if self._store.sha_exists_with_path(blob.sha, blob.path):
            return False

        observed = self._hooks.apply(hook_names.BLOB_CHANGED, True, blob)
        if observed is not True:
            logger.debug(
                f"{tags.HOOKS} {hook_names.BLOB_CHANGED} returned {observed!r} for {blob.path}; "
                "store lookup wins"
            )
        return True


__all__ = ["ChangeDetector"]
