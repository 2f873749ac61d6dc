# ghsync/export/webhook.py
"""POSTs a summary of new posts to an HTTP endpoint."""

from __future__ import annotations

from typing import Any, Dict, Sequence

import httpx

from ghsync.core.errors import NotificationError
from ghsync.core.http import APIError, handle_api_error, raise_for_status
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.post import Post

logger = get_logger(__name__)

PROVIDER = "notify"


class WebhookNotifier:
    """
    Sends {"event": "new_posts", "posts": [...]} to a URL.

    Only post identity fields are sent, not content.
    """

    def __init__(self, client: httpx.Client, url: str) -> None:
        self._client = client
        self._url = url

    def notify_new(self, posts: Sequence[Post]) -> None:
        body = {"event": "new_posts", "posts": [_summarize(post) for post in posts]}
        try:
            response = self._client.post(self._url, json=body)
            raise_for_status(response, provider=PROVIDER, endpoint=self._url)
        except APIError as e:
            raise NotificationError(f"Failed to notify {self._url}: {e}") from e
        except httpx.HTTPError as e:
            error = handle_api_error(e, provider=PROVIDER, endpoint=self._url)
            raise NotificationError(f"Failed to notify {self._url}: {error}") from e

        logger.info(f"{tags.EXPORT} Notified {self._url} of {len(posts)} new posts")


def _summarize(post: Post) -> Dict[str, Any]:
    return {
        "id": post.id,
        "title": post.title,
        "type": post.post_type,
        "status": post.status,
        "path": post.source_path,
        "sha": post.sha,
    }


__all__ = ["WebhookNotifier"]
