from dataclasses import dataclass, fields, replace
from enum import Enum
from pathlib import Path


class Environment(Enum):
    """Runtime environment for the application.

    Selects the log format; nothing else depends on it.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels accepted by the logging setup."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


DEFAULT_API_HOST = "api.soundcloud.com"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the app and the CLI.

    download_dir of None means downloads go to temporary files that are
    removed by end_stream. chunk_size of None streams chunks as the server
    delivers them.
    """

    environment: Environment = Environment.DEVELOPMENT
    log_level: LogLevel = LogLevel.INFO
    client_id: str | None = None
    api_host: str = DEFAULT_API_HOST
    download_dir: Path | None = None
    chunk_size: int | None = None


def build_settings(**overrides: object) -> Settings:
    """Build Settings from keyword overrides, ignoring None values.

    Lets callers such as the CLI pass every option through unconditionally
    and only override the fields the user actually set.
    """
    known = {f.name for f in fields(Settings)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    applied = {key: value for key, value in overrides.items() if value is not None}
    return replace(Settings(), **applied)
