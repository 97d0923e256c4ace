"""Streaming transfer of a resolved stream to disk.

This module provides StreamTransfer, which writes the body of a stream URL
to a file chunk by chunk, reports per-chunk progress to an optional
callback, and removes the partial file when anything goes wrong.
"""

import asyncio
import typing as t
from pathlib import Path

import aiofiles
import aiofiles.os
import aiohttp
from aiofiles.threadpool.binary import AsyncBufferedIOBase

from ..domain.exceptions import MissingContentLengthError
from ..domain.progress import ProgressCallback, ProgressCounter
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru


class StreamTransfer:
    """Streams an HTTP response body into a file.

    Implementation Decisions:
    - The response status is not validated; whatever body the media origin
      returns is written. Resolution already established the stream exists.
    - Chunk sizes come from the server unless `chunk_size` is set.
    - The progress callback runs before each chunk is written, so a failing
      callback leaves that chunk unwritten.
    - Partial files are removed on any error and the error is re-raised
      after logging.
    """

    def __init__(
        self,
        client: aiohttp.ClientSession,
        logger: "loguru.Logger" = get_logger(__name__),
        chunk_size: int | None = None,
    ) -> None:
        """Initialize the transfer.

        Args:
            client: Configured aiohttp ClientSession for making HTTP requests
            logger: Logger instance for recording transfer events and errors
            chunk_size: Fixed read size in bytes. None yields chunks as they
                       arrive from the server.
        """
        self.client = client
        self.logger = logger
        self.chunk_size = chunk_size

    def _iter_body(self, response: aiohttp.ClientResponse) -> t.AsyncIterator[bytes]:
        if self.chunk_size is None:
            return response.content.iter_any()
        return response.content.iter_chunked(self.chunk_size)

    async def _write_chunk_to_file(
        self, chunk: bytes, file_handle: AsyncBufferedIOBase
    ) -> None:
        await file_handle.write(chunk)

    def _log_and_categorize_error(self, exception: Exception, url: str) -> None:
        """Log transfer errors with a category prefix describing the failure."""
        match exception:
            # Network connection errors - issues establishing connection
            case aiohttp.ClientConnectorError():
                error_category = "Failed to connect to"
            case aiohttp.ClientPayloadError():
                error_category = "Invalid response payload from"
            case aiohttp.ClientError():
                error_category = "Network error streaming from"

            # Timeout errors - transport gave up
            case asyncio.TimeoutError():
                error_category = "Timeout streaming from"

            # Progress could not be computed
            case MissingContentLengthError():
                error_category = "No Content-Length for progress from"

            # File system errors - issues writing to disk
            case PermissionError():
                error_category = "Permission denied writing stream from"
            case OSError():
                error_category = "File system error streaming from"

            # Generic fallback - unexpected errors, including callback failures
            case _:
                error_category = "Unexpected error streaming from"
                self.logger.debug(
                    f"Uncaught exception of type {type(exception).__name__}: {exception}"
                )

        self.logger.error(f"{error_category} {url}: {exception}")

    async def transfer(
        self,
        url: str,
        destination_path: Path,
        on_chunk: ProgressCallback | None = None,
    ) -> int:
        """Stream `url` into `destination_path`.

        Args:
            url: Resolved stream URL
            destination_path: File to create or truncate
            on_chunk: Called per chunk with (total_percent, current_percent,
                     chunk). Requires the server to send Content-Length.

        Returns:
            Number of bytes written.

        Raises:
            aiohttp.ClientError: For network related errors
            MissingContentLengthError: If on_chunk is given and the response
                has no usable Content-Length
            OSError: For filesystem errors
        """
        self.logger.debug(f"Starting transfer: {url} -> {destination_path}")

        try:
            async with aiofiles.open(destination_path, "wb") as file_handle:
                async with self.client.get(url) as response:
                    counter = ProgressCounter(url, response.content_length)

                    async for chunk in self._iter_body(response):
                        counter.record(chunk)
                        if on_chunk is not None:
                            total_percent, current_percent = counter.percentages()
                            on_chunk(total_percent, current_percent, chunk)
                        await self._write_chunk_to_file(chunk, file_handle)

        except asyncio.CancelledError:
            await self._cleanup_partial_file(destination_path)
            self.logger.debug(f"Transfer cancelled, cleaned up: {destination_path}")
            raise

        except Exception as transfer_error:
            await self._cleanup_partial_file(destination_path)
            self._log_and_categorize_error(transfer_error, url)
            raise

        self.logger.debug(
            f"Transfer finished: {destination_path} ({counter.bytes_received} bytes)"
        )
        return counter.bytes_received

    async def _cleanup_partial_file(self, file_path: Path) -> None:
        """Remove a partially written file if it exists.

        Cleanup failures are logged, not raised, so the original error is
        the one the caller sees.
        """
        try:
            if await aiofiles.os.path.exists(file_path):
                await aiofiles.os.remove(file_path)
                self.logger.debug(f"Cleaned up partial file: {file_path}")
        except OSError as cleanup_error:
            self.logger.warning(
                f"Failed to clean up partial file {file_path}: {cleanup_error}"
            )
