from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Mapping

from tmpkit.core.schemas import TempOptions, coerce_options
from tmpkit.services.registry_service import Registry
from tmpkit.utils.temp import unique_temp_dir, unique_temp_path

Options = TempOptions | Mapping[str, Any] | None


class PathBuilder:
    """Build unique paths under ``root`` and register them in ``registry``.

    File paths are not created. A named file gets a fresh random parent
    directory (created and tracked) so that equal names never collide.
    Directory paths are created eagerly.
    """

    def __init__(self, root: str | Path, registry: Registry):
        self.root = Path(root)
        self.registry = registry

    def build_file(self, opts: TempOptions) -> tuple[str, str]:
        """Return ``(path, owner)`` where ``owner`` is what must be deleted to release ``path``."""
        if opts.name:
            parent = unique_temp_dir(self.root)
            owner = self.registry.track(parent)
            path = parent / opts.name
        else:
            path = unique_temp_path(self.root, opts.suffix)
            owner = str(path)
        return self.registry.track(path), owner

    def file_path(self, options: Options = None, **kwargs: Any) -> str:
        path, _ = self.build_file(coerce_options(options, **kwargs))
        return path

    def directory_path(self) -> str:
        return self.registry.track(unique_temp_dir(self.root))

    async def file_path_async(self, options: Options = None, **kwargs: Any) -> str:
        opts = coerce_options(options, **kwargs)
        path, _ = await asyncio.to_thread(self.build_file, opts)
        return path

    async def directory_path_async(self) -> str:
        return await asyncio.to_thread(self.directory_path)
