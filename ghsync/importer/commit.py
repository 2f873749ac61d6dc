# ghsync/importer/commit.py
"""
Commit importer.

Orchestrates the import of one commit:
1. Refuse commits that were already imported
2. For every blob, in tree order: classify -> detect change -> select
   processor -> transform
3. Save all resulting posts as one batch
4. Announce and export the posts that are new
5. Record the commit as imported

Per-blob outcomes are diagnostics collected on the ImportReport; only
commit-level failures raise.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ghsync.core import hooks as hook_names
from ghsync.core.errors import AlreadySyncedError
from ghsync.core.hooks import HookRegistry
from ghsync.export.base import Notifier
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.blob import Blob
from ghsync.models.commit import Commit
from ghsync.models.post import Post
from ghsync.store.base import ContentStore

from .classifier import ContentClassifier
from .detector import ChangeDetector
from .processors import ProcessorRegistry

logger = get_logger(__name__)

NO_PROCESSOR = "no processor"
NOT_CALLABLE = "not callable"

NOTHING_TO_IMPORT = "No importable content"


@dataclass
class ImportResult:
    """
    What happened to one blob.

    Fields stay None for steps the blob never reached.
    """

    path: str
    importable: Optional[bool] = None
    changed: Optional[bool] = None
    processor: Optional[str] = None
    new: Optional[bool] = None
    result: Any = None

    @property
    def imported(self) -> bool:
        return self.new is not None


@dataclass
class ImportReport:
    """Outcome of importing one commit."""

    commit_sha: str
    results: List[ImportResult] = field(default_factory=list)
    posts: List[Post] = field(default_factory=list)
    new_posts: List[Post] = field(default_factory=list)
    message: str = NOTHING_TO_IMPORT

    @property
    def summary(self) -> Dict[str, int]:
        return {
            "visited": len(self.results),
            "excluded": sum(1 for r in self.results if r.importable is False),
            "unchanged": sum(1 for r in self.results if r.changed is False),
            "skipped": sum(1 for r in self.results if r.importable and r.changed and not r.imported),
            "imported": len(self.posts),
            "new": len(self.new_posts),
        }

    def __str__(self) -> str:
        return self.message


class CommitImporter:
    """
    Imports the blobs of a commit into the content store.

    Usage:
        importer = CommitImporter(store=store, notifier=LogNotifier())
        report = importer.import_commit(fetcher.fetch_master())
        print(report)  # "Imported 2 posts from commit 1a2b3c4"
    """

    def __init__(
        self,
        *,
        store: ContentStore,
        notifier: Notifier,
        hooks: Optional[HookRegistry] = None,
        processors: Optional[ProcessorRegistry] = None,
    ) -> None:
        """
        Args:
            store: Content store used for change detection and persistence.
            notifier: Export collaborator told about new posts.
            hooks: Extension points. A fresh, empty registry when omitted.
            processors: Processor registry. Built on `hooks` when omitted.
        """
        self._store = store
        self._notifier = notifier
        self._hooks = hooks if hooks is not None else HookRegistry()
        self._processors = processors if processors is not None else ProcessorRegistry(self._hooks)
        self._classifier = ContentClassifier(self._hooks)
        self._detector = ChangeDetector(store, self._hooks)

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    @property
    def processors(self) -> ProcessorRegistry:
        return self._processors

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    def import_commit(self, commit: Commit) -> ImportReport:
        """
        Import a commit.

        Raises:
            AlreadySyncedError: The commit is the last one imported.
            PersistenceError: The batch could not be saved.
            NotificationError: Posts were saved but exporting new ones failed.
        """
        if commit.already_synced():
            raise AlreadySyncedError(f"Already synced commit {commit.short_sha}.")

        report = ImportReport(commit_sha=commit.sha)
        logger.info(f"{tags.IMPORT} Importing commit {commit.short_sha} ({len(commit.tree)} blobs)")

        for blob in commit.tree.blobs():
            result = ImportResult(path=blob.path)
            report.results.append(result)

            post = self._import_blob(blob, result)
            if post is None:
                continue

            report.posts.append(post)
            if post.is_new:
                report.new_posts.append(post)

        for result in report.results:
            logger.debug(f"{tags.IMPORT} {result}")

        if not report.posts:
            self._store.mark_imported(commit.sha)
            logger.info(f"{tags.IMPORT} {NOTHING_TO_IMPORT} in {commit.short_sha}: {report.summary}")
            return report

        ids = self._store.save_batch(report.posts, commit.author_identity)
        for post, post_id in zip(report.posts, ids):
            post.id = post_id

        if report.new_posts:
            self._hooks.do_action(hook_names.NEW_CONTENT_IMPORTED, list(report.new_posts))
            self._notifier.notify_new(report.new_posts)

        self._store.mark_imported(commit.sha)

        report.message = f"Imported {len(report.posts)} post(s) from commit {commit.short_sha}"
        logger.info(f"{tags.IMPORT} {report.message}: {report.summary}")
        return report

    def _import_blob(self, blob: Blob, result: ImportResult) -> Optional[Post]:
        """Run one blob through the pipeline, recording each negative outcome."""
        if not self._classifier.is_importable(blob):
            result.importable = False
            return None
        result.importable = True

        if not self._detector.has_changed(blob):
            result.changed = False
            return None
        result.changed = True

        processor = self._processors.select(blob)
        if not processor:
            result.processor = NO_PROCESSOR
            return None

        func = self._processors.resolve(processor)
        if func is None:
            result.processor = NOT_CALLABLE
            return None
        result.processor = str(processor)

        try:
            output = func(blob)
        except Exception as e:
            logger.warning(f"{tags.IMPORT} Processor {processor} failed on {blob.path}: {e}")
            result.result = f"error: {e}"
            return None

        if not isinstance(output, Post):
            result.result = output if output else False
            return None

        result.new = output.is_new
        return output


__all__ = [
    "CommitImporter",
    "ImportResult",
    "ImportReport",
    "NO_PROCESSOR",
    "NOT_CALLABLE",
    "NOTHING_TO_IMPORT",
]
