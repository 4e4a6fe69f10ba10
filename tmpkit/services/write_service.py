from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any

from tmpkit.core.schemas import coerce_options
from tmpkit.services.path_service import Options, PathBuilder
from tmpkit.utils.io import drain_to_file, is_buffer, is_stream, to_bytes

logger = logging.getLogger(__name__)


class ResourceWriter:
    def __init__(self, paths: PathBuilder):
        self.paths = paths

    def write_sync(self, content: str | bytes | bytearray | memoryview, options: Options = None, **kwargs: Any) -> str:
        """Write a string or buffer to a new temp file and return its path."""
        if not is_buffer(content):
            raise TypeError(
                f"write_sync() accepts str or bytes-like content, not {type(content).__name__}; "
                "use write() for streams"
            )
        data = to_bytes(content)
        path = self.paths.file_path(options, **kwargs)
        Path(path).write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return path

    async def write(self, content: Any, options: Options = None, **kwargs: Any) -> str:
        """Write a string, buffer or readable byte stream to a new temp file.

        An error raised by the stream propagates as is; the destination is
        then in an unspecified state.
        """
        if is_buffer(content):
            data = to_bytes(content)
            path = await self.paths.file_path_async(options, **kwargs)
            await asyncio.to_thread(Path(path).write_bytes, data)
            logger.debug("Wrote %d bytes to %s", len(data), path)
            return path
        if is_stream(content):
            opts = coerce_options(options, **kwargs)
            path = await self.paths.file_path_async(opts)
            await drain_to_file(content, path)
            logger.debug("Drained stream to %s", path)
            return path
        raise TypeError(f"Cannot write content of type {type(content).__name__}")
