"""
Image Viewer Shell Core Package.

This package contains the core logic of the application, separated from
the web layer: the shared image registry, the launch-time ingest and the
commands exposed to the presentation layer.

ARCHITECTURE RULES:
- core/ modules may only import from:
  - Python standard library
  - other core/ modules
  - config (for global configuration)

- core/ modules MUST NOT import from:
  - web/ (no Flask dependencies)
  - flask, werkzeug, or any web-specific packages
"""

__all__ = [
    "image_registry",
    "ingest_core",
    "viewer_core",
]
