from __future__ import annotations

import asyncio
import logging
import threading
from pathlib import Path

from tmpkit.utils.temp import remove_path

logger = logging.getLogger(__name__)


class Registry:
    """Paths created by this process, kept for a later bulk clean."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._paths: set[str] = set()

    def __len__(self) -> int:
        with self._lock:
            return len(self._paths)

    def __contains__(self, path: object) -> bool:
        with self._lock:
            return str(path) in self._paths

    def paths(self) -> list[str]:
        with self._lock:
            return sorted(self._paths)

    def track(self, path: str | Path) -> str:
        p = str(path)
        with self._lock:
            self._paths.add(p)
        logger.debug("Tracking temp path %s", p)
        return p

    def discard(self, path: str | Path) -> None:
        with self._lock:
            self._paths.discard(str(path))

    def _drain(self) -> list[str]:
        with self._lock:
            drained = list(self._paths)
            self._paths.clear()
        return drained

    @staticmethod
    def _remove(path: str) -> None:
        # the path may already be gone or owned by a removed parent
        try:
            remove_path(path)
            logger.debug("Deleted temp path %s", path)
        except OSError as e:
            logger.debug("Could not delete temp path %s: %s", path, e)

    def clean(self) -> list[str]:
        """Delete every tracked path and return the paths that were targeted."""
        drained = self._drain()
        for path in drained:
            self._remove(path)
        return drained

    async def clean_async(self) -> list[str]:
        drained = self._drain()
        for path in drained:
            await asyncio.to_thread(self._remove, path)
        return drained
