# ghsync/remote/__init__.py
from ghsync.remote.base import CommitFetcher, SyncStateReader
from ghsync.remote.github import GitHubFetcher

__all__ = ["CommitFetcher", "SyncStateReader", "GitHubFetcher"]
