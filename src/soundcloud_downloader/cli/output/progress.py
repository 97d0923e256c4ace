"""Result display functions for CLI."""

from pathlib import Path

import typer


def display_download_start(reference: str) -> None:
    """Display download started message."""
    typer.echo(f"Resolving: {reference}")


def display_download_complete(path: Path) -> None:
    """Display completion message, ending the progress bar line first."""
    typer.echo()
    typer.secho(f"✓ Downloaded: {path}", fg=typer.colors.GREEN)


def display_cleanup(path: Path, removed: bool) -> None:
    if removed:
        typer.echo(f"Removed: {path}")
    else:
        typer.echo(f"Kept: {path}")


def display_download_error(reference: str, error: Exception) -> None:
    """Display error message."""
    typer.secho(f"✗ Failed: {reference}", fg=typer.colors.RED, err=True)
    typer.secho(f"  Error: {error}", fg=typer.colors.RED, err=True)
