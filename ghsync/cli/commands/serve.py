# ghsync/cli/commands/serve.py
"""Run the webhook receiver."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import uvicorn

from ghsync.api.app import create_app
from ghsync.cli.context import load_config_or_exit, setup
from ghsync.cli.ui import ui
from ghsync.runtime import SyncRuntime


def command(
    host: str = "127.0.0.1",
    port: int = 8000,
    config: Optional[Path] = None,
    verbose: bool = False,
) -> None:
    setup(verbose)
    runtime = SyncRuntime.from_config(load_config_or_exit(config))

    if not runtime.config.webhook_secret:
        ui.warning("No webhook_secret configured; payload signatures will not be checked")

    ui.info(f"Listening on http://{host}:{port}/webhook")
    try:
        uvicorn.run(create_app(runtime), host=host, port=port, log_level="debug" if verbose else "info")
    finally:
        runtime.close()
