# ghsync/importer/payload.py
"""
Payload importer: the entry point for push events and full resyncs.

import_payload() imports the pushed head commit, then deletes every path
removed by any commit in the push. Failures from both phases are merged
into a single SyncError so that one bad deletion never hides another.
"""

from __future__ import annotations

from typing import Optional

from ghsync.core.errors import AlreadySyncedError, SyncError
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.payload import Payload
from ghsync.remote.base import CommitFetcher
from ghsync.store.base import ContentStore

from .commit import CommitImporter, ImportReport

logger = get_logger(__name__)

PAYLOAD_PROCESSED = "Payload processed"


class PayloadImporter:
    """
    Usage:
        importer = PayloadImporter(fetcher=fetcher, store=store, commits=commit_importer)
        message = importer.import_payload(Payload.model_validate(body))
    """

    def __init__(
        self,
        *,
        fetcher: CommitFetcher,
        store: ContentStore,
        commits: CommitImporter,
    ) -> None:
        self._fetcher = fetcher
        self._store = store
        self._commits = commits

    @property
    def commits(self) -> CommitImporter:
        return self._commits

    def import_payload(self, payload: Payload) -> str:
        """
        Import the head commit of a push, then remove deleted paths.

        Every removal is attempted even after failures.

        Raises:
            SyncError: Aggregate of the commit import error (if any) and
                every failed deletion. The first failure is the primary cause.
        """
        error: Optional[SyncError] = None

        commit_id = payload.get_commit_id()
        logger.info(f"{tags.IMPORT} Processing payload for {commit_id[:7] or '<none>'}")

        try:
            self._commits.import_commit(self._fetcher.fetch_commit(commit_id))
        except SyncError as e:
            if e.benign:
                logger.info(f"{tags.IMPORT} {e}")
            else:
                logger.warning(f"{tags.IMPORT} Commit import failed: {e}")
            error = e

        for path in payload.removed_paths():
            try:
                self._store.delete_by_path(path)
            except SyncError as e:
                logger.warning(f"{tags.IMPORT} Could not delete {path}: {e}")
                if error is None:
                    error = e
                elif isinstance(error, AlreadySyncedError):
                    # A real failure is never raised as the no-op type.
                    error = SyncError(error.message, code=error.code).merge(e)
                else:
                    error.merge(e)

        if error is not None:
            raise error

        return PAYLOAD_PROCESSED

    def import_master(self) -> ImportReport:
        """
        Import the current head of the configured branch.

        Raises:
            FetchError, AlreadySyncedError, PersistenceError, NotificationError
        """
        return self._commits.import_commit(self._fetcher.fetch_master())


__all__ = ["PayloadImporter", "PAYLOAD_PROCESSED"]
