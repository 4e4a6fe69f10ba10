from __future__ import annotations

import atexit
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, TypeVar

from tmpkit.core.config import Settings, settings
from tmpkit.core.errors import ConfigurationError
from tmpkit.services.job_service import ScopedJobs
from tmpkit.services.path_service import Options, PathBuilder
from tmpkit.services.registry_service import Registry
from tmpkit.services.write_service import ResourceWriter

R = TypeVar("R")


class TempSpace:
    """Temp paths under one root, with their registry, writer and job helpers.

    With ``auto_clean`` the registry's ``clean`` is registered with ``atexit``,
    which keeps the registry alive until the process exits.
    """

    def __init__(self, root: str | Path | None = None, registry: Registry | None = None, auto_clean: bool = False):
        resolved = os.path.realpath(os.fspath(root if root is not None else settings.root))
        if not os.path.isabs(resolved):
            raise ConfigurationError(f"Temp root must be absolute, got {resolved!r}")
        try:
            os.makedirs(resolved, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(f"Temp root {resolved!r} is not usable: {e}") from e

        self._root = resolved
        self.registry = registry if registry is not None else Registry()
        self.paths = PathBuilder(resolved, self.registry)
        self.writer = ResourceWriter(self.paths)
        self.jobs = ScopedJobs(self.paths)
        if auto_clean:
            atexit.register(self.registry.clean)

    @property
    def root(self) -> str:
        return self._root

    @root.setter
    def root(self, value: Any) -> None:
        raise ConfigurationError("`root` is read-only")

    # --- Paths ---

    def file(self, options: Options = None, **kwargs: Any) -> str:
        return self.paths.file_path(options, **kwargs)

    async def file_async(self, options: Options = None, **kwargs: Any) -> str:
        return await self.paths.file_path_async(options, **kwargs)

    def directory(self) -> str:
        return self.paths.directory_path()

    async def directory_async(self) -> str:
        return await self.paths.directory_path_async()

    # --- Content ---

    async def write(self, content: Any, options: Options = None, **kwargs: Any) -> str:
        return await self.writer.write(content, options, **kwargs)

    def write_sync(self, content: str | bytes, options: Options = None, **kwargs: Any) -> str:
        return self.writer.write_sync(content, options, **kwargs)

    # --- Jobs ---

    def temporary_file(self, options: Options = None, **kwargs: Any):
        return self.jobs.temporary_file(options, **kwargs)

    def temporary_directory(self):
        return self.jobs.temporary_directory()

    def temporary_file_async(self, options: Options = None, **kwargs: Any):
        return self.jobs.temporary_file_async(options, **kwargs)

    def temporary_directory_async(self):
        return self.jobs.temporary_directory_async()

    def job_file(self, fn: Callable[[str], R], options: Options = None, **kwargs: Any) -> R:
        return self.jobs.job_file(fn, options, **kwargs)

    def job_directory(self, fn: Callable[[str], R]) -> R:
        return self.jobs.job_directory(fn)

    async def job_file_async(self, fn: Callable[[str], R | Awaitable[R]], options: Options = None, **kwargs: Any) -> R:
        return await self.jobs.job_file_async(fn, options, **kwargs)

    async def job_directory_async(self, fn: Callable[[str], R | Awaitable[R]]) -> R:
        return await self.jobs.job_directory_async(fn)

    # --- Cleanup ---

    def clean(self) -> list[str]:
        return self.registry.clean()

    async def clean_async(self) -> list[str]:
        return await self.registry.clean_async()


def create_space(config: Settings | None = None) -> TempSpace:
    cfg = config or settings
    return TempSpace(root=cfg.root, auto_clean=cfg.auto_clean)


space = create_space()
