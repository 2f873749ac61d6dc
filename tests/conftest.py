# tests/conftest.py
"""
Shared fakes and fixtures.

Test Tiers:
- tier1: pure logic, no I/O
- tier2: real SQLite files, mocked HTTP, ASGI and CLI runners

Collaborators (store, notifier, fetcher) are in-memory fakes that record
every call so tests can assert on what the importer did.
"""

from __future__ import annotations

import base64
import dataclasses
import hashlib
from typing import Any, Callable, Dict, List, Optional, Sequence, Set

import httpx
import pytest

from ghsync.core.errors import DeletionError, FetchError, NotificationError, PersistenceError
from ghsync.core.hooks import HookRegistry
from ghsync.core.paths import SyncPaths
from ghsync.importer.commit import CommitImporter
from ghsync.importer.payload import PayloadImporter
from ghsync.models.blob import Blob
from ghsync.models.commit import Commit, Tree
from ghsync.models.post import Post


def git_sha(data: bytes) -> str:
    return hashlib.sha1(data).hexdigest()


def make_blob(path: str, content: str = "", sha: Optional[str] = None) -> Blob:
    data = content.encode("utf-8")
    return Blob.from_bytes(path, sha or git_sha(data + path.encode("utf-8")), data)


def make_post_blob(path: str, body: str = "Hello.", sha: Optional[str] = None, **frontmatter) -> Blob:
    lines = [f"{key}: {value}" for key, value in frontmatter.items()]
    content = "---\n" + "\n".join(lines) + "\n---\n" + body
    return make_blob(path, content, sha=sha)


def make_commit(sha: str, *blobs: Blob, author_email: str = "author@example.com") -> Commit:
    return Commit(
        sha=sha,
        tree=Tree(sha=f"tree-{sha}", entries=tuple(blobs)),
        message=f"commit {sha}",
        author_name="Author",
        author_email=author_email,
    )


class FakeStore:
    """In-memory ContentStore keyed by source path."""

    def __init__(self):
        self.posts: Dict[str, Post] = {}
        self.batches: List[List[Post]] = []
        self.authors: List[str] = []
        self.delete_attempts: List[str] = []
        self.fail_save = False
        self.fail_delete: Set[str] = set()
        self.last_sha: Optional[str] = None
        self._next_id = 1

    def sha_exists_with_path(self, sha: str, path: str) -> bool:
        post = self.posts.get(path)
        return post is not None and post.sha == sha

    def save_batch(self, posts: Sequence[Post], author: str) -> List[int]:
        self.batches.append(list(posts))
        self.authors.append(author)
        if self.fail_save:
            raise PersistenceError("disk full")

        ids = []
        for post in posts:
            existing = self.posts.get(post.source_path)
            post_id = post.id or (existing.id if existing else None)
            if post_id is None:
                post_id = self._next_id
                self._next_id += 1
            self.posts[post.source_path] = dataclasses.replace(post, id=post_id)
            ids.append(post_id)
        return ids

    def delete_by_path(self, path: str) -> None:
        self.delete_attempts.append(path)
        if path in self.fail_delete:
            raise DeletionError(f"Failed to delete post for {path}")
        if self.posts.pop(path, None) is None:
            raise DeletionError(f"No post found for path {path}", code="path_not_found")

    def last_imported_sha(self) -> Optional[str]:
        return self.last_sha

    def mark_imported(self, sha: str) -> None:
        self.last_sha = sha

    def seed(self, blob: Blob, post_id: int = 100) -> None:
        """Pretend blob was imported earlier."""
        self.posts[blob.path] = Post(
            content=blob.content_import(),
            id=post_id,
            meta={"_sha": blob.sha, "_source_path": blob.path},
        )


class FakeNotifier:
    def __init__(self):
        self.calls: List[List[Post]] = []
        self.fail = False

    def notify_new(self, posts: Sequence[Post]) -> None:
        self.calls.append(list(posts))
        if self.fail:
            raise NotificationError("endpoint returned 502")


class FakeFetcher:
    """Serves prepared commits and flags the one the store imported last."""

    def __init__(self, store: FakeStore, master: Optional[str] = None):
        self.store = store
        self.master = master
        self.commits: Dict[str, Commit] = {}
        self.fetched: List[str] = []

    def add(self, commit: Commit) -> Commit:
        self.commits[commit.sha] = commit
        if self.master is None:
            self.master = commit.sha
        return commit

    def fetch_commit(self, sha: str) -> Commit:
        self.fetched.append(sha)
        if sha not in self.commits:
            raise FetchError(f"github resource not found (HTTP 404) - commit {sha}")
        return dataclasses.replace(
            self.commits[sha], synced=self.store.last_imported_sha() == sha
        )

    def fetch_master(self) -> Commit:
        if self.master is None:
            raise FetchError("No branch head")
        return self.fetch_commit(self.master)


REPO = "/repos/octocat/blog"


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def reply(status: int, **kwargs: Any) -> Callable[[], httpx.Response]:
    return lambda: httpx.Response(status, **kwargs)


class FakeGitHub:
    """
    Routes git-data API requests to canned JSON.

    Commit c1 (tree t1) holds _posts/a.md and copy/a.md (same blob b1,
    markdown with front-matter) plus the binary logo.png.
    """

    def __init__(self):
        self.routes: Dict[str, Callable[[], httpx.Response]] = {
            f"{REPO}/git/ref/heads/master": reply(200, json={"object": {"sha": "c1"}}),
            f"{REPO}/git/commits/c1": reply(
                200,
                json={
                    "sha": "c1",
                    "message": "Add post",
                    "tree": {"sha": "t1"},
                    "author": {"name": "Jo", "email": "jo@example.com"},
                },
            ),
            f"{REPO}/git/trees/t1": reply(
                200,
                json={
                    "sha": "t1",
                    "truncated": False,
                    "tree": [
                        {"path": "_posts", "type": "tree", "sha": "d1"},
                        {"path": "_posts/a.md", "type": "blob", "sha": "b1"},
                        {"path": "logo.png", "type": "blob", "sha": "b2"},
                        {"path": "copy/a.md", "type": "blob", "sha": "b1"},
                    ],
                },
            ),
            f"{REPO}/git/blobs/b1": reply(
                200, json={"encoding": "base64", "content": b64(b"---\nlayout: post\n---\nHi")}
            ),
            f"{REPO}/git/blobs/b2": reply(
                200, json={"encoding": "base64", "content": b64(b"\x89PNG\x00")}
            ),
        }
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        respond = self.routes.get(request.url.path)
        if respond is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return respond()

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_paths():
    yield
    SyncPaths.reset()


@pytest.fixture
def store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def hooks() -> HookRegistry:
    return HookRegistry()


@pytest.fixture
def importer(store, notifier, hooks) -> CommitImporter:
    return CommitImporter(store=store, notifier=notifier, hooks=hooks)


@pytest.fixture
def fetcher(store) -> FakeFetcher:
    return FakeFetcher(store)


@pytest.fixture
def payload_importer(fetcher, store, importer) -> PayloadImporter:
    return PayloadImporter(fetcher=fetcher, store=store, commits=importer)


@pytest.fixture
def github() -> FakeGitHub:
    return FakeGitHub()
