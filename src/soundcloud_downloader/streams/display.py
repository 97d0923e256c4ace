"""Console progress bar used when download() displays progress."""

import typer

from ..domain.progress import ProgressCallback

# Clears the current terminal line before redrawing
_LINE_RESET = "\r\x1b[0K"


def render_progress_bar(char: str, end_char: str, position: int) -> None:
    """Redraw the current line as `position` copies of `char` plus `end_char`.

    Examples:
        render_progress_bar("=", ">", 5)   # =====>
        render_progress_bar("=", ">", 10)  # ==========>
    """
    typer.echo(f"{_LINE_RESET}{char * position}{end_char}", nl=False)


def console_progress(char: str = "=", end_char: str = ">") -> ProgressCallback:
    """Build a progress callback that draws one bar cell per percent received."""

    def on_chunk(total_percent: float, current_percent: int, chunk: bytes) -> None:
        render_progress_bar(char, end_char, current_percent)

    return on_chunk
