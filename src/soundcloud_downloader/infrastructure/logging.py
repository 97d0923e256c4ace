"""Logging setup built on loguru.

loguru exposes a single global logger. This module owns its sink
configuration so the rest of the package only ever asks for a logger via
get_logger() and never touches handlers directly.
"""

import sys
import typing as t

from loguru import logger as _logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEVELOPMENT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.DEVELOPMENT,
) -> None:
    """Replace all loguru sinks with one stderr sink for the environment.

    Development gets a coloured, human readable format with diagnostics.
    Production and testing get serialised JSON records.
    """
    global _configured

    level = LogLevel(level)
    _logger.remove()

    if environment == Environment.DEVELOPMENT:
        _logger.add(
            sys.stderr,
            level=level.value,
            format=_DEVELOPMENT_FORMAT,
            colorize=True,
            backtrace=True,
            diagnose=True,
        )
    else:
        _logger.add(
            sys.stderr,
            level=level.value,
            serialize=True,
            backtrace=False,
            diagnose=False,
        )

    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return the shared logger bound to a component name.

    Configures logging with defaults on first use so library code works
    without an explicit setup call.
    """
    if not _configured:
        configure_logger()
    return _logger.bind(name=name)


def reset_logging() -> None:
    """Remove all sinks and forget the configuration. Used by tests."""
    global _configured
    _logger.remove()
    _configured = False


def is_configured() -> bool:
    return _configured
