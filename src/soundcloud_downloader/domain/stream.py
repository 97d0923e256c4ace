"""Core domain models for a stream session."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SessionState(Enum):
    """Stream session states.

    Flow: UNRESOLVED -> RESOLVED -> LOADED
    A failed resolve returns the session to UNRESOLVED.
    """

    UNRESOLVED = "unresolved"  # No usable stream URL
    RESOLVED = "resolved"  # Stream URL known, nothing loaded yet
    LOADED = "loaded"  # A file was loaded for the current stream


class ResolvedStream(BaseModel):
    """Result of a successful resolve: the direct, time-limited media URL.

    Passed from resolve() into load() so the precondition travels with the
    value instead of living only in client state.
    """

    model_config = ConfigDict(frozen=True)

    reference_url: str = Field(description="API reference the stream was resolved from")
    stream_url: str = Field(description="Redirect target serving the audio")
