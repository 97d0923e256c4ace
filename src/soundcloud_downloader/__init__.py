"""Resolve SoundCloud API stream references and download the audio."""

from .domain import (
    MissingContentLengthError,
    NothingToCleanError,
    ReferenceParseError,
    ResolvedStream,
    SessionState,
    StorageConfig,
    StorageMode,
    StreamClientError,
    UnresolvedURLError,
)
from .streams import StreamClient

__all__ = [
    "StreamClient",
    "ResolvedStream",
    "SessionState",
    "StorageConfig",
    "StorageMode",
    "StreamClientError",
    "ReferenceParseError",
    "UnresolvedURLError",
    "NothingToCleanError",
    "MissingContentLengthError",
]
