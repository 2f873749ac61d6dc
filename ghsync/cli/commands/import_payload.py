# ghsync/cli/commands/import_payload.py
"""Import a saved push payload (JSON file, or - for stdin)."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ghsync.cli.context import exit_for, open_runtime, setup
from ghsync.cli.ui import ui
from ghsync.core.errors import SyncError
from ghsync.models.payload import Payload


def read_payload(source: str) -> Payload:
    """Parse a payload from a file path or "-" (stdin)."""
    try:
        if source == "-":
            raw = sys.stdin.read()
        else:
            raw = Path(source).read_text(encoding="utf-8")
        return Payload.model_validate(json.loads(raw))
    except OSError as e:
        ui.error(f"Cannot read payload: {e}")
    except json.JSONDecodeError as e:
        ui.error(f"Payload is not valid JSON: {e}")
    except ValidationError as e:
        ui.error(f"Payload does not look like a push event: {e}")
    raise typer.Exit(code=1)


def command(source: str, config: Optional[Path] = None, verbose: bool = False) -> None:
    setup(verbose)
    payload = read_payload(source)

    with open_runtime(config) as runtime:
        try:
            message = runtime.importer.import_payload(payload)
        except SyncError as e:
            exit_for(e)
            return

    ui.success(message)
