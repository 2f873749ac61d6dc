# ghsync/cli/commands/__init__.py
"""CLI command implementations, imported lazily by ghsync.cli.cli."""
