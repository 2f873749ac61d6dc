# ghsync/store/sqlite.py
"""SQLite-backed content store."""

from __future__ import annotations

import json
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from ghsync.core.errors import DeletionError, PersistenceError
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.post import Post

logger = get_logger(__name__)

LAST_IMPORTED_KEY = "last_imported_sha"


class SqliteContentStore:
    """
    Local post storage using SQLite.

    One row per imported file. The source path is unique: saving a post
    for a path that already has a row supersedes that row. Posts carrying
    an id update the row with that id.
    """

    def __init__(self, db_path: Union[str, Path]):
        self.db_path = Path(db_path)
        self._conn: sqlite3.Connection | None = None

    @property
    def conn(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(str(self.db_path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._ensure_schema()
        return self._conn

    def _ensure_schema(self) -> None:
        """Create tables if they don't exist."""
        self.conn.executescript(
            """
            CREATE TABLE IF NOT EXISTS posts (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                source_path TEXT UNIQUE,
                sha TEXT,
                post_type TEXT NOT NULL,
                status TEXT NOT NULL,
                title TEXT NOT NULL,
                content TEXT NOT NULL,
                meta TEXT NOT NULL,
                author TEXT,
                updated_at TEXT NOT NULL
            );
            CREATE INDEX IF NOT EXISTS idx_posts_sha ON posts (sha);
            CREATE TABLE IF NOT EXISTS sync_state (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            );
            """
        )
        self.conn.commit()

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # =========================================================================
    # Lookups
    # =========================================================================

    def sha_exists_with_path(self, sha: str, path: str) -> bool:
        row = self.conn.execute(
            "SELECT 1 FROM posts WHERE sha = ? AND source_path = ? LIMIT 1",
            (sha, path),
        ).fetchone()
        return row is not None

    def get_by_path(self, path: str) -> Optional[Post]:
        row = self.conn.execute("SELECT * FROM posts WHERE source_path = ?", (path,)).fetchone()
        return _row_to_post(row) if row else None

    def get(self, post_id: int) -> Optional[Post]:
        row = self.conn.execute("SELECT * FROM posts WHERE id = ?", (post_id,)).fetchone()
        return _row_to_post(row) if row else None

    def count(self) -> int:
        return self.conn.execute("SELECT COUNT(*) FROM posts").fetchone()[0]

    # =========================================================================
    # Writes
    # =========================================================================

    def save_batch(self, posts: Sequence[Post], author: str) -> List[int]:
        """
        Save every post in one transaction.

        Raises:
            PersistenceError: If any row fails; nothing is written.
        """
        ids: List[int] = []
        now = datetime.now(timezone.utc).isoformat()
        try:
            with self.conn:
                for post in posts:
                    ids.append(self._save_one(post, author, now))
        except sqlite3.Error as e:
            logger.warning(f"{tags.STORE} Batch of {len(posts)} posts rolled back: {e}")
            raise PersistenceError(f"Failed to save posts: {e}") from e

        logger.info(f"{tags.STORE} Saved {len(ids)} posts (author={author or 'unknown'})")
        return ids

    def _save_one(self, post: Post, author: str, now: str) -> int:
        values: Dict[str, Any] = {
            "source_path": post.source_path,
            "sha": post.sha,
            "post_type": post.post_type,
            "status": post.status,
            "title": post.title,
            "content": post.content,
            "meta": json.dumps(post.meta, default=str),
            "author": author,
            "updated_at": now,
        }

        target_id = post.id
        if target_id is None and post.source_path is not None:
            row = self.conn.execute(
                "SELECT id FROM posts WHERE source_path = ?", (post.source_path,)
            ).fetchone()
            if row:
                target_id = row["id"]

        if target_id is not None:
            # A row elsewhere may still hold this path; the id wins.
            self.conn.execute(
                "DELETE FROM posts WHERE source_path = ? AND id != ?",
                (post.source_path, target_id),
            )
            columns = ", ".join(values)
            placeholders = ", ".join("?" for _ in values)
            self.conn.execute(
                f"INSERT OR REPLACE INTO posts (id, {columns}) VALUES (?, {placeholders})",
                (target_id, *values.values()),
            )
            return target_id

        columns = ", ".join(values)
        placeholders = ", ".join("?" for _ in values)
        cursor = self.conn.execute(
            f"INSERT INTO posts ({columns}) VALUES ({placeholders})",
            tuple(values.values()),
        )
        return cursor.lastrowid

    def delete_by_path(self, path: str) -> None:
        """
        Delete the post imported from path.

        Raises:
            DeletionError: If no post has that path or the delete fails.
        """
        try:
            with self.conn:
                cursor = self.conn.execute("DELETE FROM posts WHERE source_path = ?", (path,))
        except sqlite3.Error as e:
            raise DeletionError(f"Failed to delete post for {path}: {e}") from e

        if cursor.rowcount == 0:
            raise DeletionError(f"No post found for path {path}", code="path_not_found")

        logger.info(f"{tags.STORE} Deleted post for {path}")

    # =========================================================================
    # Sync state
    # =========================================================================

    def last_imported_sha(self) -> Optional[str]:
        row = self.conn.execute(
            "SELECT value FROM sync_state WHERE key = ?", (LAST_IMPORTED_KEY,)
        ).fetchone()
        return row["value"] if row else None

    def mark_imported(self, sha: str) -> None:
        with self.conn:
            self.conn.execute(
                "INSERT OR REPLACE INTO sync_state (key, value) VALUES (?, ?)",
                (LAST_IMPORTED_KEY, sha),
            )
        logger.debug(f"{tags.STORE} Marked commit {sha} as imported")


def _row_to_post(row: sqlite3.Row) -> Post:
    return Post(
        content=row["content"],
        post_type=row["post_type"],
        status=row["status"],
        title=row["title"],
        id=row["id"],
        meta=json.loads(row["meta"]),
    )


__all__ = ["SqliteContentStore"]
