"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from ..infrastructure.logging import setup_logging
from .commands.download import download
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, state: CLIState | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional fully built CLIState, e.g. with a mocked client factory

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="scdl",
        help="SoundCloud stream downloader - resolve API references and save audio",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        client_id: Optional[str] = typer.Option(
            None,
            "--client-id",
            "-c",
            envvar="SOUNDCLOUD_CLIENT_ID",
            help="SoundCloud client id",
        ),
        download_dir: Optional[Path] = typer.Option(
            None,
            "--download-dir",
            "-d",
            help="Directory to keep downloads in (temporary files if omitted)",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            resolved_state = state
        else:
            resolved_settings = settings or build_settings(
                client_id=client_id,
                download_dir=download_dir,
                log_level=LogLevel.DEBUG if verbose else None,
            )
            resolved_state = CLIState(resolved_settings)

        setup_logging(resolved_state.settings)
        ctx.obj = resolved_state

    app.command()(download)

    return app
