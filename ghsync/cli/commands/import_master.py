# ghsync/cli/commands/import_master.py
"""Full resync: import the current head of the configured branch."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ghsync.cli.context import exit_for, open_runtime, setup
from ghsync.cli.ui import ui
from ghsync.core.errors import SyncError


def command(config: Optional[Path] = None, verbose: bool = False) -> None:
    setup(verbose)

    with open_runtime(config) as runtime:
        ui.info(f"Importing {runtime.config.repository}@{runtime.config.branch}")
        try:
            report = runtime.importer.import_master()
        except SyncError as e:
            exit_for(e)
            return

    ui.success(report.message)
    ui.summary(f"commit {report.commit_sha[:7]}", report.summary)
