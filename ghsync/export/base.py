# ghsync/export/base.py
"""Notification of newly imported posts."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.post import Post

logger = get_logger(__name__)


@runtime_checkable
class Notifier(Protocol):
    """
    Protocol for the export collaborator.

    Receives only posts that did not exist before the import. Raises
    NotificationError on failure.
    """

    def notify_new(self, posts: Sequence[Post]) -> None:
        ...


class LogNotifier:
    """Notifier that only logs. Used when no notify_url is configured."""

    def notify_new(self, posts: Sequence[Post]) -> None:
        for post in posts:
            logger.info(f"{tags.EXPORT} New {post.post_type} {post.title!r} from {post.source_path}")


__all__ = ["Notifier", "LogNotifier"]
