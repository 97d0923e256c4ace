"""Fixtures for stream client tests."""

import pytest

from soundcloud_downloader.domain.storage import StorageConfig
from soundcloud_downloader.streams import StreamClient

CREDENTIAL = "abc123"


@pytest.fixture
def make_client(aio_client, mock_logger):
    """Factory fixture for StreamClient instances sharing the test session."""

    def _make_client(storage: StorageConfig | None = None, **kwargs) -> StreamClient:
        return StreamClient(
            CREDENTIAL,
            storage=storage,
            client=aio_client,
            logger=mock_logger,
            **kwargs,
        )

    return _make_client


@pytest.fixture
def persistent_client(make_client, tmp_path):
    """StreamClient keeping downloads in tmp_path/out."""
    return make_client(StorageConfig.persistent(tmp_path / "out"))


@pytest.fixture
def ephemeral_client(make_client, isolated_tempdir):
    """StreamClient writing temp files into the isolated temp dir."""
    return make_client(StorageConfig.ephemeral())
