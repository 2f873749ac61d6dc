# ghsync/cli/commands/status.py
"""Show what the local store holds."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ghsync.cli.context import load_config_or_exit, setup
from ghsync.cli.ui import ui
from ghsync.core.paths import SyncPaths
from ghsync.store.sqlite import SqliteContentStore


def command(config: Optional[Path] = None, verbose: bool = False) -> None:
    setup(verbose)
    cfg = load_config_or_exit(config)

    store = SqliteContentStore(cfg.database or SyncPaths.database())
    try:
        last = store.last_imported_sha()
        count = store.count()
    finally:
        store.close()

    ui.info(f"repository: {cfg.repository}@{cfg.branch}")
    ui.info(f"database:   {store.db_path}")
    if last:
        ui.success(f"Last imported commit {last[:7]}, {count} post(s) stored")
    else:
        ui.warning(f"Nothing imported yet ({count} post(s) stored)")
