"""
Image Registry - Process-wide store of accepted image paths.

The registry is created once at startup and handed by reference to the
launch-time ingest and to the API layer. It is append-only: paths are kept
exactly as supplied, in insertion order, duplicates included.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

logger = logging.getLogger(__name__)


class RegistryPoisonedError(RuntimeError):
    """Raised when the registry was left in an unknown state by a failed mutation."""


class ImageRegistry:
    def __init__(self):
        self._paths: list[str] = []
        self._lock = threading.Lock()
        self._poisoned = False

    # ------------------------------------------------------------------
    # Guard
    # ------------------------------------------------------------------

    @contextmanager
    def _guard(self, mutating: bool = False) -> Iterator[list[str]]:
        """
        Holds the lock for the duration of the block.

        An exception escaping a mutating block poisons the registry; every
        later access raises RegistryPoisonedError.
        """
        with self._lock:
            if self._poisoned:
                raise RegistryPoisonedError(
                    "Image registry is poisoned by an earlier failed write"
                )
            try:
                yield self._paths
            except BaseException:
                if mutating:
                    self._poisoned = True
                    logger.critical("Image registry poisoned during write")
                raise

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def append(self, path: str) -> None:
        """Appends a path. No validation happens here."""
        with self._guard(mutating=True) as paths:
            paths.append(path)

    def list(self) -> list[str]:
        """Returns a snapshot copy of all stored paths in insertion order."""
        with self._guard() as paths:
            return list(paths)

    def __len__(self) -> int:
        with self._guard() as paths:
            return len(paths)

    @property
    def poisoned(self) -> bool:
        return self._poisoned
