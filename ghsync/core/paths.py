# ghsync/core/paths.py
"""
Central path management for ghsync.

All paths are relative to the workspace root, which defaults to
{CWD}/.ghsync/. Tests override it with SyncPaths.set_workspace().
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class SyncPaths:
    """
    Central path management for ghsync.

    Usage:
        from ghsync.core.paths import SyncPaths

        config_path = SyncPaths.config()
        db_path = SyncPaths.database()

        # Override workspace for testing
        SyncPaths.set_workspace("/tmp/test_ghsync")
    """

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """
        Override the workspace root.

        Pass None to reset to default (CWD).
        """
        if path is None:
            cls._workspace_override = None
        else:
            cls._workspace_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD). Useful in tests."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """
        The .ghsync workspace directory.

        Default: {CWD}/.ghsync/
        """
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd() / ".ghsync"

    @classmethod
    def config(cls) -> Path:
        """
        Default config file path.

        Location: {workspace}/config.yaml
        """
        return cls.workspace() / "config.yaml"

    @classmethod
    def database(cls) -> Path:
        """
        Default SQLite content store.

        Location: {workspace}/content.db
        """
        return cls.workspace() / "content.db"
