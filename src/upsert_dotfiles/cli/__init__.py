"""upsert-dotfiles CLI - copy shared dotfiles into the current directory."""

from pathlib import Path
from typing import Optional

import typer

from ..config import ConfigError
from ..fetch import FetchError, is_git_available
from ..sync import CopyError, fetched_entries, preview, sync
from ..utils import get_version, setup_logging
from .helpers import exit_on_sigterm, get_config

app = typer.Typer(
    name="upsert-dotfiles",
    help="Copy shared dotfiles into the current directory.",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"upsert-dotfiles version {get_version()}")
        raise typer.Exit()


@app.command()
def upsert(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging output.",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-n",
        help="Show what would be copied without changing anything",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
):
    """Fetch the shared dotfiles and copy them here.

    Files that do not exist yet are copied. For files that already
    exist you are asked whether to overwrite them, skip them, or
    overwrite them and everything after them.

    Examples:
        upsert-dotfiles             # Copy, asking on conflicts
        upsert-dotfiles --dry-run   # Preview only
    """
    setup_logging(verbose=verbose)
    exit_on_sigterm()

    if not is_git_available():
        typer.echo("Error: git not found on PATH.", err=True)
        raise typer.Exit(1)

    try:
        config = get_config()
        config.validate()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    target = Path.cwd()

    try:
        if dry_run:
            _show_preview(config, target)
            return
        sync(config, target)
    except FetchError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except CopyError as e:
        typer.echo(f"Error: {e}", err=True)
        typer.echo("Remaining dotfiles were not copied.", err=True)
        raise typer.Exit(1)

    typer.echo("Done.")


def _show_preview(config, target: Path) -> None:
    typer.echo("\n--- DRY RUN (no changes will be made) ---\n")
    with fetched_entries(config, target) as entries:
        items = preview(entries)
    if not items:
        typer.echo("Nothing to copy.")
    for name, exists in items:
        if exists:
            typer.echo(f"  {name} - exists, would ask")
        else:
            typer.echo(f"  {name} - would copy")
    typer.echo("\n--- Dry Run Complete ---")


def main():
    """Main entry point for the upsert-dotfiles CLI."""
    app()
