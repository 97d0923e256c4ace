"""Custom exceptions for the SoundCloud stream client."""


class StreamClientError(Exception):
    """Base exception for StreamClient errors."""

    pass


class ClientNotInitializedError(StreamClientError):
    """Raised when the HTTP session is accessed before the client is opened.

    This typically occurs when calling resolve/load without using the client
    as a context manager, calling open(), or injecting a session.
    """

    pass


class ReferenceParseError(StreamClientError, ValueError):
    """Raised when a reference is not a usable http(s) URL or API path.

    Raised before any network request is made.
    """

    def __init__(self, reference: str, reason: str) -> None:
        self.reference = reference
        self.reason = reason
        super().__init__(f"Invalid reference URL {reference!r}: {reason}")


class UnresolvedURLError(StreamClientError):
    """Raised when loading is attempted without a resolved stream URL."""

    def __init__(
        self, message: str = "URL not found, did you call `resolve` first?"
    ) -> None:
        super().__init__(message)


class NothingToCleanError(StreamClientError):
    """Raised when end_stream is called before any file was loaded."""

    def __init__(
        self, message: str = "No files were loaded, nothing to clean up."
    ) -> None:
        super().__init__(message)


class MissingContentLengthError(StreamClientError, ZeroDivisionError):
    """Raised when progress is requested but the server sent no usable length.

    Progress percentages are relative to Content-Length, so an absent or zero
    header makes them undefined.
    """

    def __init__(self, url: str, content_length: int | None) -> None:
        self.url = url
        self.content_length = content_length
        super().__init__(
            f"Cannot report progress for {url}: "
            f"Content-Length is {content_length!r}"
        )
