"""Domain layer - core models and exceptions."""

from .exceptions import (
    ClientNotInitializedError,
    MissingContentLengthError,
    NothingToCleanError,
    ReferenceParseError,
    StreamClientError,
    UnresolvedURLError,
)
from .progress import ProgressCallback, ProgressCounter
from .storage import StorageConfig, StorageMode
from .stream import ResolvedStream, SessionState

__all__ = [
    # Stream Models
    "ResolvedStream",
    "SessionState",
    # Storage Models
    "StorageConfig",
    "StorageMode",
    # Progress
    "ProgressCallback",
    "ProgressCounter",
    # Exceptions
    "StreamClientError",
    "ClientNotInitializedError",
    "ReferenceParseError",
    "UnresolvedURLError",
    "NothingToCleanError",
    "MissingContentLengthError",
]
