"""
Viewer Core - Commands exposed to the presentation layer.

Three operations over the shared image registry and the presentation window:
- get_image_paths: snapshot of all registered paths
- add_image: direct append, WITHOUT the launch-time validation
- quit_app: ask the window to close

add_image trusts its caller. Only the launch ingest (core.ingest_core)
checks existence and extension.
"""

import logging
from typing import Protocol

from core.image_registry import ImageRegistry

logger = logging.getLogger(__name__)


class Window(Protocol):
    def close(self) -> object: ...


def get_image_paths(registry: ImageRegistry) -> list[str]:
    """Returns all registered image paths in insertion order."""
    return registry.list()


def add_image(registry: ImageRegistry, path: str) -> None:
    """Appends a path to the registry as-is."""
    registry.append(path)
    logger.debug(f"Image added: {path}")


def quit_app(window: Window) -> None:
    """Requests the presentation window to close. The registry is untouched."""
    logger.info("Quit requested, closing window")
    window.close()
