"""Stream client session: resolve, load and clean up one stream at a time.

This module provides the StreamClient class which owns the credential, the
storage configuration and the HTTP session, and threads the resolved stream
URL and the downloaded file path between its operations.
"""

import secrets
import ssl
import typing as t
from pathlib import Path

import aiofiles.os
import aiohttp
import certifi

from ..config.settings import DEFAULT_API_HOST
from ..domain.exceptions import (
    ClientNotInitializedError,
    NothingToCleanError,
    UnresolvedURLError,
)
from ..domain.progress import ProgressCallback
from ..domain.storage import StorageConfig
from ..domain.stream import ResolvedStream, SessionState
from ..infrastructure.logging import get_logger
from .destination import DestinationResolver
from .display import console_progress
from .resolver import StreamResolver
from .transfer import StreamTransfer

if t.TYPE_CHECKING:
    import loguru


class StreamClient:
    """Resolves SoundCloud API references and downloads the audio they point to.

    One client is one session: a credential, a storage configuration, the
    most recently resolved stream and the most recently loaded file. Calls
    are sequential; a client is not meant to be shared between tasks.

    Usage:
        async with StreamClient("client-id", StorageConfig.persistent("out")) as sc:
            stream = await sc.resolve("https://api.soundcloud.com/tracks/42/stream")
            if stream is not None:
                path = await sc.load("my-track")

    Or, resolving and loading in one call with a console progress bar:
        async with StreamClient("client-id") as sc:
            path = await sc.download(reference, name="my-track")
    """

    def __init__(
        self,
        credential: str,
        storage: StorageConfig | None = None,
        client: aiohttp.ClientSession | None = None,
        api_host: str = DEFAULT_API_HOST,
        chunk_size: int | None = None,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        """Initialise the stream client.

        Args:
            credential: SoundCloud client id sent with every resolve request.
            storage: Where downloads go. Defaults to ephemeral temp files.
            client: HTTP session to use. If None, one is created on open()
                   and closed on close().
            api_host: Host that reference paths are resolved against.
            chunk_size: Fixed read size for transfers. None uses the chunks
                       the server delivers.
            logger: Logger instance for recording client events.
        """
        self._credential = credential
        self.storage = storage or StorageConfig.ephemeral()
        self._client = client
        self._owns_client = False
        self.api_host = api_host
        self.chunk_size = chunk_size
        self._logger = logger

        self._destinations = DestinationResolver(self.storage, logger=logger)
        self._resolved: ResolvedStream | None = None
        self._downloaded_path: Path | None = None
        self._loaded_stream: ResolvedStream | None = None

    @property
    def credential(self) -> str:
        return self._credential

    @property
    def resolved(self) -> ResolvedStream | None:
        """Stream from the last resolve() call, or None if it did not resolve."""
        return self._resolved

    @property
    def resolved_url(self) -> str | None:
        return self._resolved.stream_url if self._resolved else None

    @property
    def downloaded_path(self) -> Path | None:
        """Path returned by the most recent load(), tracked for end_stream()."""
        return self._downloaded_path

    @property
    def state(self) -> SessionState:
        """LOADED only while the tracked file belongs to the resolved stream."""
        if self._resolved is None:
            return SessionState.UNRESOLVED
        if self._loaded_stream != self._resolved:
            return SessionState.RESOLVED
        return SessionState.LOADED

    @property
    def http(self) -> aiohttp.ClientSession:
        """Get the HTTP client session.

        Raises:
            ClientNotInitializedError: If accessed before open() or entering
                the context manager, without a session injected.
        """
        if self._client is None:
            raise ClientNotInitializedError(
                "StreamClient must be used as a context manager or "
                "initialized with a client"
            )
        return self._client

    async def open(self) -> None:
        """Create the HTTP session if one was not injected.

        Uses certifi's certificate bundle for portable SSL verification.
        """
        if self._client is None:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            self._client = aiohttp.ClientSession(connector=connector)
            self._owns_client = True

    async def close(self) -> None:
        """Close the HTTP session if this client created it. Idempotent."""
        if self._owns_client and self._client is not None:
            await self._client.close()
            self._client = None
            self._owns_client = False

    async def __aenter__(self) -> "StreamClient":
        await self.open()
        return self

    async def __aexit__(self, *args: t.Any) -> None:
        await self.close()

    async def resolve(self, reference: str) -> ResolvedStream | None:
        """Resolve an API reference into a direct stream URL.

        A successful resolve replaces the session's stream. Any response other
        than a 302 with a Location header leaves the session unresolved, so a
        following load() raises UnresolvedURLError instead of fetching an
        older stream.

        Returns:
            The resolved stream, or None if the API did not redirect.

        Raises:
            ReferenceParseError: If `reference` is malformed. Session state is
                left untouched and no request is made.
        """
        resolver = StreamResolver(
            self.http, self._credential, api_host=self.api_host, logger=self._logger
        )
        self._resolved = await resolver.resolve(reference)
        return self._resolved

    async def load(
        self,
        name: str | None = None,
        on_chunk: ProgressCallback | None = None,
        *,
        stream: ResolvedStream | None = None,
    ) -> Path:
        """Download the resolved stream unless it is already on disk.

        Args:
            name: File name without extension, used by persistent storage.
                 Defaults to a random hex identifier.
            on_chunk: Progress callback, see ProgressCallback.
            stream: Stream to load. Defaults to the session's resolved stream.

        Returns:
            Path of the downloaded (or previously downloaded) file.

        Raises:
            UnresolvedURLError: If there is no stream to load. No I/O happens.
            MissingContentLengthError: If on_chunk is given and the server
                omits Content-Length.
            OSError: Directory creation and write failures, unmodified.
        """
        stream = stream or self._resolved
        if stream is None:
            raise UnresolvedURLError()

        name = name or secrets.token_hex(16)
        destination = await self._destinations.resolve(name)

        if destination.exists:
            self._logger.debug(f"Already downloaded, skipping: {destination.path}")
        else:
            transfer = StreamTransfer(
                self.http, logger=self._logger, chunk_size=self.chunk_size
            )
            await transfer.transfer(stream.stream_url, destination.path, on_chunk)

        self._downloaded_path = destination.path
        self._loaded_stream = stream
        return destination.path

    async def download(
        self,
        reference: str,
        name: str = "unknown",
        display_progress: bool = True,
    ) -> Path:
        """Resolve `reference` and load it, drawing a progress bar if asked.

        Raises:
            UnresolvedURLError: If the reference did not resolve.
        """
        await self.resolve(reference)
        on_chunk = console_progress() if display_progress else None
        return await self.load(name, on_chunk)

    async def end_stream(self, force: bool = False) -> None:
        """Delete the last loaded file according to the storage mode.

        Ephemeral files are always deleted. Persistent files are deleted only
        with `force`. The tracked path is kept, so deleting twice raises
        FileNotFoundError.

        Raises:
            NothingToCleanError: If nothing was loaded in this session.
            OSError: If deletion fails.
        """
        if self._downloaded_path is None:
            raise NothingToCleanError()

        if self.storage.is_persistent and not force:
            self._logger.debug(f"Keeping persisted download: {self._downloaded_path}")
            return

        await aiofiles.os.remove(self._downloaded_path)
        self._logger.debug(f"Removed download: {self._downloaded_path}")
