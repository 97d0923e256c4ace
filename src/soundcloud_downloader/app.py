from dataclasses import dataclass

from .config.settings import Settings
from .infrastructure.logging import setup_logging


@dataclass(frozen=True)
class App:
    """Application wiring container.

    Holds references to cross-cutting concerns (currently only `Settings`).
    Keeps configuration out of the stream client and makes tests easy to set
    up by passing explicit `Settings`.
    """

    settings: Settings


def create_app(settings: Settings | None = None) -> App:
    """Create an `App` with provided settings or defaults and configure logging."""
    settings = settings or Settings()
    setup_logging(settings)
    return App(settings=settings)
