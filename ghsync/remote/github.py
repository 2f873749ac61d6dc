# ghsync/remote/github.py
"""
GitHub git-data API fetcher.

Resolves a commit into a Commit snapshot:
1. GET /repos/{repo}/git/commits/{sha}          -> tree sha, author, message
2. GET /repos/{repo}/git/trees/{tree}?recursive=1 -> blob entries
3. GET /repos/{repo}/git/blobs/{sha}             -> base64 content (cached)

Every transport or HTTP failure is reported as FetchError.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict, List, Optional

import httpx

from ghsync.core.errors import FetchError
from ghsync.core.http import APIError, handle_api_error, raise_for_status
from ghsync.logging import tags
from ghsync.logging.logger import get_logger
from ghsync.models.blob import Blob
from ghsync.models.commit import Commit, Tree

from .base import SyncStateReader

logger = get_logger(__name__)

PROVIDER = "github"


class GitHubFetcher:
    """
    Fetches commits from one repository.

    Usage:
        client = create_api_client(config.api_url, api_key=config.token)
        fetcher = GitHubFetcher(client, "octocat/blog", branch="master", state=store)
        commit = fetcher.fetch_master()
    """

    def __init__(
        self,
        client: httpx.Client,
        repository: str,
        branch: str = "master",
        state: Optional[SyncStateReader] = None,
    ) -> None:
        """
        Args:
            client: HTTP client with base URL and auth configured.
            repository: "owner/name".
            branch: Branch resolved by fetch_master().
            state: Source of the last imported sha, used to flag synced commits.
        """
        self._client = client
        self._repository = repository
        self._branch = branch
        self._state = state
        self._blob_cache: Dict[str, Blob] = {}

    @property
    def repository(self) -> str:
        return self._repository

    def fetch_master(self) -> Commit:
        data = self._get(f"/git/ref/heads/{self._branch}")
        try:
            sha = data["object"]["sha"]
        except (KeyError, TypeError) as e:
            raise FetchError(f"Malformed ref response for branch {self._branch!r}") from e
        logger.info(f"{tags.REMOTE} {self._branch} is at {sha[:7]}")
        return self.fetch_commit(sha)

    def fetch_commit(self, sha: str) -> Commit:
        if not sha:
            raise FetchError("No commit id to fetch")

        data = self._get(f"/git/commits/{sha}")
        try:
            tree_sha = data["tree"]["sha"]
            author = data.get("author") or {}
            message = data.get("message", "")
        except (KeyError, TypeError) as e:
            raise FetchError(f"Malformed commit response for {sha}") from e

        tree = self._fetch_tree(tree_sha)
        last = self._state.last_imported_sha() if self._state is not None else None

        return Commit(
            sha=data.get("sha", sha),
            tree=tree,
            message=message,
            author_name=author.get("name", ""),
            author_email=author.get("email", ""),
            synced=last is not None and last == data.get("sha", sha),
        )

    def _fetch_tree(self, tree_sha: str) -> Tree:
        data = self._get(f"/git/trees/{tree_sha}", params={"recursive": "1"})
        try:
            entries: List[Dict[str, Any]] = data.get("tree", [])
            truncated = bool(data.get("truncated", False))
            files = [(entry["path"], entry["sha"]) for entry in entries if entry.get("type") == "blob"]
        except (AttributeError, KeyError, TypeError) as e:
            raise FetchError(f"Malformed tree response for {tree_sha}") from e
        if truncated:
            logger.warning(f"{tags.REMOTE} Tree {tree_sha[:7]} was truncated by the API; some files are missing")

        blobs = tuple(self._fetch_blob(path, sha) for path, sha in files)
        logger.debug(f"{tags.REMOTE} Tree {tree_sha[:7]} has {len(blobs)} blobs")
        return Tree(sha=tree_sha, entries=blobs, truncated=truncated)

    def _fetch_blob(self, path: str, sha: str) -> Blob:
        cached = self._blob_cache.get(sha)
        if cached is not None:
            if cached.path == path:
                return cached
            return Blob(path=path, sha=sha, content=cached.content, mimetype=cached.mimetype)

        data = self._get(f"/git/blobs/{sha}")
        try:
            raw = _decode_content(data)
        except (KeyError, ValueError, binascii.Error) as e:
            raise FetchError(f"Could not decode blob {sha} ({path}): {e}") from e

        blob = Blob.from_bytes(path, sha, raw)
        self._blob_cache[sha] = blob
        return blob

    def _get(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        url = f"/repos/{self._repository}{endpoint}"
        try:
            response = self._client.get(url, params=params)
            raise_for_status(response, provider=PROVIDER, endpoint=url)
            return response.json()
        except APIError as e:
            raise FetchError(str(e)) from e
        except httpx.HTTPError as e:
            raise FetchError(str(handle_api_error(e, provider=PROVIDER, endpoint=url))) from e
        except ValueError as e:
            raise FetchError(f"Invalid JSON from {url}: {e}") from e


def _decode_content(data: Dict[str, Any]) -> bytes:
    encoding = data.get("encoding", "base64")
    content = data["content"]
    if encoding == "base64":
        return base64.b64decode(content)
    if encoding == "utf-8":
        return content.encode("utf-8")
    raise ValueError(f"unsupported encoding {encoding!r}")


__all__ = ["GitHubFetcher"]
