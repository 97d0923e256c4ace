"""Storage configuration for downloaded streams."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class StorageMode(Enum):
    """Where downloads are written and who owns them afterwards.

    PERSISTENT: `{directory}/{name}.mp3`, kept unless cleanup is forced.
    EPHEMERAL: a fresh temporary file per download, always removed on cleanup.
        Temp files are not deleted when the session closes or the process
        exits; they outlive the session unless end_stream() is called.
    """

    PERSISTENT = "persistent"
    EPHEMERAL = "ephemeral"


class StorageConfig(BaseModel):
    """Storage mode plus the directory it needs, validated together."""

    model_config = ConfigDict(frozen=True)

    mode: StorageMode = Field(
        default=StorageMode.EPHEMERAL,
        description="Whether downloads persist in a directory or use temp files",
    )
    directory: Path | None = Field(
        default=None,
        description="Target directory, required for persistent storage",
    )

    @model_validator(mode="after")
    def check_directory_matches_mode(self) -> "StorageConfig":
        if self.mode == StorageMode.PERSISTENT and self.directory is None:
            raise ValueError("persistent storage requires a directory")
        if self.mode == StorageMode.EPHEMERAL and self.directory is not None:
            raise ValueError("ephemeral storage does not take a directory")
        return self

    @classmethod
    def persistent(cls, directory: Path | str) -> "StorageConfig":
        return cls(mode=StorageMode.PERSISTENT, directory=Path(directory))

    @classmethod
    def ephemeral(cls) -> "StorageConfig":
        return cls(mode=StorageMode.EPHEMERAL)

    @classmethod
    def from_directory(cls, directory: Path | str | None) -> "StorageConfig":
        """Map an optional directory onto a storage mode.

        Examples:
            >>> StorageConfig.from_directory(None).mode
            <StorageMode.EPHEMERAL: 'ephemeral'>
            >>> StorageConfig.from_directory("/tmp/out").directory
            PosixPath('/tmp/out')
        """
        if directory is None:
            return cls.ephemeral()
        return cls.persistent(directory)

    @property
    def is_persistent(self) -> bool:
        return self.mode == StorageMode.PERSISTENT
