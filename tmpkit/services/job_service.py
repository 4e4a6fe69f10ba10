"""Scoped temp resources: acquire a path, run caller code, always delete it."""

from __future__ import annotations

import asyncio
import inspect
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncIterator, Awaitable, Callable, Iterator, TypeVar

from tmpkit.core.schemas import coerce_options
from tmpkit.services.path_service import Options, PathBuilder
from tmpkit.utils.temp import remove_path

logger = logging.getLogger(__name__)

R = TypeVar("R")


class ScopedJobs:
    def __init__(self, paths: PathBuilder):
        self.paths = paths

    def _release(self, owner: str) -> None:
        remove_path(owner)
        self.paths.registry.discard(owner)
        logger.debug("Released job resource %s", owner)

    async def _release_async(self, owner: str) -> None:
        await asyncio.to_thread(self._release, owner)

    @contextmanager
    def temporary_file(self, options: Options = None, **kwargs: Any) -> Iterator[str]:
        path, owner = self.paths.build_file(coerce_options(options, **kwargs))
        try:
            yield path
        finally:
            self.paths.registry.discard(path)
            self._release(owner)

    @contextmanager
    def temporary_directory(self) -> Iterator[str]:
        path = self.paths.directory_path()
        try:
            yield path
        finally:
            self._release(path)

    @asynccontextmanager
    async def temporary_file_async(self, options: Options = None, **kwargs: Any) -> AsyncIterator[str]:
        opts = coerce_options(options, **kwargs)
        path, owner = await asyncio.to_thread(self.paths.build_file, opts)
        try:
            yield path
        finally:
            self.paths.registry.discard(path)
            await self._release_async(owner)

    @asynccontextmanager
    async def temporary_directory_async(self) -> AsyncIterator[str]:
        path = await self.paths.directory_path_async()
        try:
            yield path
        finally:
            await self._release_async(path)

    def job_file(self, fn: Callable[[str], R], options: Options = None, **kwargs: Any) -> R:
        with self.temporary_file(options, **kwargs) as path:
            return fn(path)

    def job_directory(self, fn: Callable[[str], R]) -> R:
        with self.temporary_directory() as path:
            return fn(path)

    async def job_file_async(self, fn: Callable[[str], R | Awaitable[R]], options: Options = None, **kwargs: Any) -> R:
        async with self.temporary_file_async(options, **kwargs) as path:
            return await _resolve(fn(path))

    async def job_directory_async(self, fn: Callable[[str], R | Awaitable[R]]) -> R:
        async with self.temporary_directory_async() as path:
            return await _resolve(fn(path))


async def _resolve(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result
