# ghsync/models/__init__.py
from ghsync.models.blob import Blob
from ghsync.models.commit import Commit, Tree
from ghsync.models.payload import Payload, PayloadCommit
from ghsync.models.post import META_PATH, META_SHA, Post

__all__ = [
    "Blob",
    "Tree",
    "Commit",
    "Post",
    "Payload",
    "PayloadCommit",
    "META_SHA",
    "META_PATH",
]
