"""Destination path derivation and the already-downloaded check."""

import typing as t
from dataclasses import dataclass
from pathlib import Path

import aiofiles.os
import aiofiles.tempfile

from ..domain.storage import StorageConfig
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    import loguru

AUDIO_SUFFIX = ".mp3"
TEMP_PREFIX = "soundcloud"


@dataclass(frozen=True)
class Destination:
    """Where a load writes, and whether a file is already there."""

    path: Path
    exists: bool


class DestinationResolver:
    """Computes the output path for a load according to the storage mode.

    Persistent storage writes `{directory}/{name}.mp3`. The directory is
    created with a single mkdir when missing; parent directories are not.

    Ephemeral storage creates a new temporary file for every load and ignores
    the name. A just-created temp file never counts as already downloaded.

    The existence check and the later write are separate steps, so two
    clients targeting the same file at once may both download it.
    """

    def __init__(
        self,
        storage: StorageConfig,
        logger: "loguru.Logger" = get_logger(__name__),
    ) -> None:
        self.storage = storage
        self.logger = logger

    async def resolve(self, name: str) -> Destination:
        """Return the destination for `name`, creating what the mode requires.

        Raises:
            OSError: From directory or temp file creation, unmodified
        """
        if self.storage.is_persistent:
            return await self._persistent_destination(name)
        return await self._ephemeral_destination()

    async def _persistent_destination(self, name: str) -> Destination:
        directory = t.cast(Path, self.storage.directory)

        if not await aiofiles.os.path.isdir(directory):
            await aiofiles.os.mkdir(directory)
            self.logger.debug(f"Created download directory: {directory}")

        path = directory / f"{name}{AUDIO_SUFFIX}"
        exists = await aiofiles.os.path.exists(path)
        return Destination(path=path, exists=exists)

    async def _ephemeral_destination(self) -> Destination:
        async with aiofiles.tempfile.NamedTemporaryFile(
            prefix=TEMP_PREFIX, suffix=AUDIO_SUFFIX, delete=False
        ) as temp_file:
            path = Path(temp_file.name)
        self.logger.debug(f"Created temporary file: {path}")
        return Destination(path=path, exists=False)
