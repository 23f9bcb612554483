"""
Viewer Service - Web Layer Service for the Image Registry.

Thin wrapper over core.viewer_core for web-specific concerns.
"""

from core import viewer_core
from core.image_registry import ImageRegistry


def get_image_paths(registry: ImageRegistry) -> list[str]:
    """
    Get all registered image paths.

    Delegates to core.viewer_core.
    """
    return viewer_core.get_image_paths(registry)


def add_image(registry: ImageRegistry, path: str) -> None:
    """
    Append an image path without validation.

    Delegates to core.viewer_core.
    """
    viewer_core.add_image(registry, path)


def quit_app(window) -> None:
    """
    Request the presentation window to close.

    Delegates to core.viewer_core.
    """
    viewer_core.quit_app(window)
