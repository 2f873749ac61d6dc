# ghsync/config/loader.py
"""
Configuration loader for ghsync.

Thin wrapper around ghsync.core.config that pins the SyncConfig schema and
resolves the database path against the workspace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ghsync.config.schema import SyncConfig
from ghsync.core.config import load_config
from ghsync.core.paths import SyncPaths


def load_sync_config(path: Optional[Union[str, Path]] = None) -> SyncConfig:
    """
    Load ghsync configuration.

    Args:
        path: Path to YAML config file. Defaults to SyncPaths.config().

    Raises:
        ConfigError: If the file is missing, unparseable or invalid
    """
    config = load_config(path, schema=SyncConfig)
    if config.database is None:
        config.database = SyncPaths.database()
    return config


__all__ = ["load_sync_config"]
