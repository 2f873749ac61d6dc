# ghsync/cli/ui.py
"""
Shared output helpers for CLI commands.

Usage:
    from ghsync.cli.ui import ui

    ui.success("Imported 2 posts")
    ui.sync_error(error)
"""

from __future__ import annotations

from typing import Dict

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghsync.core.errors import SyncError

console = Console()


class UI:
    """Consistent styling for every command."""

    def success(self, msg: str) -> None:
        console.print(f"[green]✓[/green] {escape(msg)}")

    def error(self, msg: str) -> None:
        console.print(f"[red]✗[/red] {escape(msg)}")

    def warning(self, msg: str) -> None:
        console.print(f"[yellow]⚠[/yellow] {escape(msg)}")

    def info(self, msg: str) -> None:
        console.print(f"[dim]{escape(msg)}[/dim]")

    def sync_error(self, error: SyncError) -> None:
        """Print every cause of a (possibly aggregated) error."""
        for code, message in error.errors:
            console.print(f"[red]✗[/red] {escape(message)} [dim]({escape(code)})[/dim]")

    def summary(self, title: str, counts: Dict[str, int]) -> None:
        table = Table(title=title, show_header=False, box=None)
        table.add_column("metric", style="cyan")
        table.add_column("count", justify="right")
        for key, value in counts.items():
            table.add_row(key, str(value))
        console.print(table)


ui = UI()

__all__ = ["ui", "console", "UI"]
