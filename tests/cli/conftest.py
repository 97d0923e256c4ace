"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest

from soundcloud_downloader.cli.app import create_cli_app
from soundcloud_downloader.cli.state import CLIState
from soundcloud_downloader.domain.storage import StorageConfig
from soundcloud_downloader.streams import StreamClient


@pytest.fixture
def test_app(test_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=test_settings)


@pytest.fixture
def mock_stream_client(mocker, tmp_path: Path):
    """Provide fully mocked StreamClient with spec for type safety."""
    mock = mocker.AsyncMock(spec=StreamClient)
    mock.__aenter__.return_value = mock
    mock.__aexit__.return_value = None
    mock.storage = StorageConfig.ephemeral()
    mock.download.return_value = tmp_path / "unknown.mp3"
    return mock


@pytest.fixture
def client_factory(mocker, mock_stream_client):
    """Factory recording how the CLI builds its client."""
    return mocker.Mock(return_value=mock_stream_client)


@pytest.fixture
def cli_state_with_mock_client(test_settings, client_factory):
    """CLIState that returns the mocked client."""
    return CLIState(test_settings, client_factory=client_factory)


@pytest.fixture
def app_with_mock_client(cli_state_with_mock_client):
    """CLI app with mocked client factory for testing."""
    return create_cli_app(state=cli_state_with_mock_client)
