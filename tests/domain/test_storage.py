"""Tests for StorageConfig validation and constructors."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from soundcloud_downloader.domain.storage import StorageConfig, StorageMode


class TestStorageConfigConstructors:
    """Test the named constructors."""

    def test_persistent(self, tmp_path: Path):
        storage = StorageConfig.persistent(tmp_path)

        assert storage.mode == StorageMode.PERSISTENT
        assert storage.directory == tmp_path
        assert storage.is_persistent is True

    def test_persistent_accepts_strings(self):
        storage = StorageConfig.persistent("/tmp/out")
        assert storage.directory == Path("/tmp/out")

    def test_ephemeral(self):
        storage = StorageConfig.ephemeral()

        assert storage.mode == StorageMode.EPHEMERAL
        assert storage.directory is None
        assert storage.is_persistent is False

    def test_default_is_ephemeral(self):
        assert StorageConfig() == StorageConfig.ephemeral()

    @pytest.mark.parametrize(
        ("directory", "expected_mode"),
        [
            (None, StorageMode.EPHEMERAL),
            ("/tmp/out", StorageMode.PERSISTENT),
            (Path("/tmp/out"), StorageMode.PERSISTENT),
        ],
    )
    def test_from_directory(self, directory, expected_mode):
        """An optional directory maps onto the explicit mode."""
        assert StorageConfig.from_directory(directory).mode == expected_mode


class TestStorageConfigValidation:
    """Test mode/directory consistency checks."""

    def test_persistent_without_directory_raises(self):
        with pytest.raises(ValidationError, match="requires a directory"):
            StorageConfig(mode=StorageMode.PERSISTENT)

    def test_ephemeral_with_directory_raises(self):
        with pytest.raises(ValidationError, match="does not take a directory"):
            StorageConfig(mode=StorageMode.EPHEMERAL, directory=Path("/tmp/out"))

    def test_frozen(self):
        storage = StorageConfig.ephemeral()
        with pytest.raises(ValidationError):
            storage.mode = StorageMode.PERSISTENT
