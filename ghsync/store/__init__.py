# ghsync/store/__init__.py
from ghsync.store.base import ContentStore
from ghsync.store.sqlite import SqliteContentStore

__all__ = ["ContentStore", "SqliteContentStore"]
