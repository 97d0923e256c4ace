"""Download command implementation."""

import asyncio
from pathlib import Path
from typing import Optional

import typer

from ...domain.exceptions import ReferenceParseError, UnresolvedURLError
from ...streams import StreamClient
from ...streams.resolver import parse_reference
from ..output.progress import (
    display_cleanup,
    display_download_complete,
    display_download_error,
    display_download_start,
)
from ..state import CLIState


def validate_reference(reference: str) -> str:
    """Reject malformed references at the CLI boundary.

    Raises:
        typer.Exit: If the reference is not an http(s) URL or API path
    """
    try:
        parse_reference(reference)
    except ReferenceParseError as e:
        typer.secho(f"✗ Invalid reference: {reference}", fg=typer.colors.RED, err=True)
        typer.secho(f"  {e.reason}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return reference


async def download_stream(
    reference: str,
    name: Optional[str],
    display_progress: bool,
    cleanup: bool,
    force: bool,
    client: StreamClient,
) -> Path:
    """Core download logic with an injected, already opened client.

    Raises:
        typer.Exit: If the reference does not resolve
    """
    display_download_start(reference)

    try:
        path = await client.download(
            reference,
            name=name or "unknown",
            display_progress=display_progress,
        )
    except UnresolvedURLError as e:
        display_download_error(reference, e)
        raise typer.Exit(code=1)

    display_download_complete(path)

    if cleanup:
        await client.end_stream(force=force)
        removed = force or not client.storage.is_persistent
        display_cleanup(path, removed)

    return path


def download(
    ctx: typer.Context,
    reference: str = typer.Argument(..., help="SoundCloud API URL of the stream"),
    name: Optional[str] = typer.Option(
        None, "--name", "-n", help="File name without extension"
    ),
    progress: bool = typer.Option(
        True, "--progress/--no-progress", help="Show a progress bar"
    ),
    cleanup: bool = typer.Option(
        False, "--cleanup", help="Delete temporary downloads when done"
    ),
    force: bool = typer.Option(
        False, "--force", help="With --cleanup, also delete persisted downloads"
    ),
) -> None:
    """Resolve a stream reference and download the audio.

    Examples:
        scdl -c CLIENT_ID download https://api.soundcloud.com/tracks/42/stream
        scdl -c CLIENT_ID -d ./music download URL --name my-track
        scdl -c CLIENT_ID download URL --cleanup
    """
    state: CLIState = ctx.obj

    if not state.settings.client_id:
        typer.secho(
            "✗ Missing client id: pass --client-id or set SOUNDCLOUD_CLIENT_ID",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    validated = validate_reference(reference)

    async def run() -> None:
        async with state.create_client(state.settings.client_id) as client:
            await download_stream(validated, name, progress, cleanup, force, client)

    try:
        asyncio.run(run())
    except typer.Exit:
        raise
    except Exception as e:
        typer.secho(f"Download failed: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
