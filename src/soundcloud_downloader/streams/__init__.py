"""Stream operations - resolver, transfer, destinations and the client session."""

from .client import StreamClient
from .destination import Destination, DestinationResolver
from .display import console_progress, render_progress_bar
from .resolver import StreamResolver, parse_reference
from .transfer import StreamTransfer

__all__ = [
    "StreamClient",
    "StreamResolver",
    "StreamTransfer",
    "Destination",
    "DestinationResolver",
    "console_progress",
    "render_progress_bar",
    "parse_reference",
]
