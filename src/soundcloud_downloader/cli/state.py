"""CLI state container."""

import typing as t

from ..config.settings import Settings
from ..domain.storage import StorageConfig
from ..streams import StreamClient

ClientFactory = t.Callable[..., StreamClient]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factory used to build StreamClient instances, so
    tests can swap in a mocked client.
    """

    def __init__(
        self, settings: Settings, client_factory: ClientFactory | None = None
    ):
        self.settings = settings
        self._client_factory = client_factory or StreamClient

    def create_client(self, credential: str) -> StreamClient:
        """Build a StreamClient from the current settings."""
        return self._client_factory(
            credential=credential,
            storage=StorageConfig.from_directory(self.settings.download_dir),
            api_host=self.settings.api_host,
            chunk_size=self.settings.chunk_size,
        )
