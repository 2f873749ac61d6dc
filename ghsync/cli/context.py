# ghsync/cli/context.py
"""
Shared setup for CLI commands: logging, configuration and the runtime.

Every command exits with code 1 on configuration errors and prints the
reason instead of a traceback.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer

from ghsync.cli.ui import ui
from ghsync.config.loader import load_sync_config
from ghsync.config.schema import SyncConfig
from ghsync.core.config import ConfigError
from ghsync.core.errors import SyncError
from ghsync.logging.logger import configure_logging
from ghsync.runtime import SyncRuntime


def setup(verbose: bool) -> None:
    configure_logging(logging.DEBUG if verbose else logging.INFO)


def load_config_or_exit(config_path: Optional[Path]) -> SyncConfig:
    try:
        return load_sync_config(config_path)
    except ConfigError as e:
        ui.error(str(e))
        raise typer.Exit(code=1)


@contextmanager
def open_runtime(config_path: Optional[Path]) -> Iterator[SyncRuntime]:
    """Yield a runtime and close it afterwards."""
    runtime = SyncRuntime.from_config(load_config_or_exit(config_path))
    try:
        yield runtime
    finally:
        runtime.close()


def exit_for(error: SyncError) -> None:
    """Report a SyncError; benign errors exit 0, others exit 1."""
    if error.benign:
        ui.warning(str(error))
        raise typer.Exit(code=0)
    ui.sync_error(error)
    raise typer.Exit(code=1)
