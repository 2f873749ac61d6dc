# ghsync/config/__init__.py
from ghsync.config.loader import load_sync_config
from ghsync.config.schema import SyncConfig

__all__ = ["SyncConfig", "load_sync_config"]
