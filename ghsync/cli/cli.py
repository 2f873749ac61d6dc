# ghsync/cli/cli.py
"""
ghsync CLI - Main application.

Commands:
    ghsync import-master    Import the head of the configured branch
    ghsync import-payload   Import a saved push payload
    ghsync status           Show the last imported commit
    ghsync serve            Run the webhook receiver

NOTE: Commands use lazy loading - implementation modules are imported only
when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="ghsync",
    help="Import repository content into a local content store.",
    no_args_is_help=True,
    add_completion=False,
)

ConfigOption = typer.Option(None, "--config", "-c", help="Config file (default: .ghsync/config.yaml).")
VerboseOption = typer.Option(False, "--verbose", "-v", help="Debug logging.")


@app.command("import-master")
def import_master(
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Import the current head of the configured branch."""
    from ghsync.cli.commands import import_master as mod

    mod.command(config=config, verbose=verbose)


@app.command("import-payload")
def import_payload(
    source: str = typer.Argument(..., help="Push payload JSON file, or - for stdin."),
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Import the head commit of a push payload and apply its deletions."""
    from ghsync.cli.commands import import_payload as mod

    mod.command(source=source, config=config, verbose=verbose)


@app.command("status")
def status(
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Show the last imported commit and stored post count."""
    from ghsync.cli.commands import status as mod

    mod.command(config=config, verbose=verbose)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address."),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port."),
    config: Optional[Path] = ConfigOption,
    verbose: bool = VerboseOption,
) -> None:
    """Run the webhook receiver."""
    from ghsync.cli.commands import serve as mod

    mod.command(host=host, port=port, config=config, verbose=verbose)


@app.command("version")
def version() -> None:
    """Show the ghsync version."""
    from ghsync import __version__

    typer.echo(f"ghsync {__version__}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
