# ghsync/cli/__init__.py
from ghsync.cli.cli import app, main

__all__ = ["app", "main"]
