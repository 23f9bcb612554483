"""
Ingest Core - Launch-time Image Ingestion.

Filters the candidate paths passed at process start and appends the
accepted ones to the image registry:
- the path must exist and be a regular file
- its extension (lower-cased) must be a supported image format

Rejected candidates are dropped silently. Accepted paths are stored as the
original string, without normalization and without copying the file.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from config import DEFAULT_IMAGE_EXTENSIONS
from core.image_registry import ImageRegistry

logger = logging.getLogger(__name__)


def get_extension(path: Path) -> str:
    """Lower-cased extension of the final path segment, "" if it has none."""
    # Path.suffix treats dotfiles (".png") as extensionless.
    return path.suffix[1:].lower()


def is_supported_image(
    path: str | Path, extensions: Iterable[str] | None = None
) -> bool:
    """
    Checks that a path is an existing regular file with a supported extension.

    Args:
        path: Candidate path (not canonicalized)
        extensions: Lower-case extensions without dot; defaults to
                    DEFAULT_IMAGE_EXTENSIONS

    Returns:
        True if the candidate should be accepted
    """
    allowed = DEFAULT_IMAGE_EXTENSIONS if extensions is None else tuple(extensions)
    candidate = Path(path)

    try:
        # is_file() follows symlinks; dangling links and directories fail here.
        if not candidate.is_file():
            return False
    except (OSError, ValueError):
        return False

    ext = get_extension(candidate)
    return bool(ext) and ext in allowed


def ingest_launch_paths(
    registry: ImageRegistry,
    candidates: Iterable[str] | None,
    extensions: Iterable[str] | None = None,
) -> int:
    """
    Validates launch candidates in order and appends the accepted ones.

    Args:
        registry: Shared image registry
        candidates: Paths from the command line; None means none requested
        extensions: Supported extensions, see is_supported_image

    Returns:
        Number of accepted candidates
    """
    if not candidates:
        return 0

    allowed = DEFAULT_IMAGE_EXTENSIONS if extensions is None else tuple(extensions)
    accepted = 0
    for path in candidates:
        if is_supported_image(path, allowed):
            registry.append(path)
            accepted += 1
        else:
            logger.debug(f"Skipping launch candidate: {path}")

    logger.info(f"Launch ingest accepted {accepted} image(s)")
    return accepted
