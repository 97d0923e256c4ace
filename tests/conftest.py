"""Pytest configuration and fixtures for soundcloud_downloader tests."""

import tempfile

import loguru
import pytest
import pytest_asyncio
from aiohttp import ClientSession
from typer.testing import CliRunner

from soundcloud_downloader.app import create_app
from soundcloud_downloader.cli.app import create_cli_app
from soundcloud_downloader.config.settings import Environment, LogLevel, Settings
from soundcloud_downloader.infrastructure.logging import reset_logging


@pytest.fixture
def test_settings():
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        client_id="abc123",
    )


@pytest.fixture
def test_app(test_settings):
    """Provide a test app with clean logging state."""
    reset_logging()
    app = create_app(settings=test_settings)
    yield app
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def isolated_tempdir(tmp_path, monkeypatch):
    """Route temporary files into the test's tmp_path."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp_dir))
    return temp_dir


@pytest_asyncio.fixture
async def aio_client():
    """Provide a real aiohttp ClientSession; aioresponses intercepts its requests."""
    session = ClientSession()
    yield session
    await session.close()


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
