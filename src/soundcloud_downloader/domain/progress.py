"""Per-chunk progress arithmetic for stream transfers."""

import typing as t

from .exceptions import MissingContentLengthError

# Called once per chunk, in order: (total_percent, current_percent, chunk)
ProgressCallback = t.Callable[[float, int, bytes], None]


class ProgressCounter:
    """Accumulates received bytes and derives the callback percentages.

    total_percent is content_length / content_length * 100, which is always
    100.0. Callers have come to rely on that value, so it is kept rather than
    replaced with the received fraction.
    """

    def __init__(self, url: str, content_length: int | None) -> None:
        self.url = url
        self.content_length = content_length
        self.bytes_received = 0

    def record(self, chunk: bytes) -> None:
        self.bytes_received += len(chunk)

    def percentages(self) -> tuple[float, int]:
        """Return (total_percent, current_percent) for the bytes seen so far.

        current_percent is truncated toward zero.

        Raises:
            MissingContentLengthError: If Content-Length was absent or zero
        """
        length = self.content_length
        if not length:
            raise MissingContentLengthError(self.url, length)

        total_percent = length / length * 100
        current_percent = int(self.bytes_received / length * 100)
        return total_percent, current_percent
