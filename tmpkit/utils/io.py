from __future__ import annotations

import asyncio
import inspect
from pathlib import Path
from typing import Any, AsyncIterator

CHUNK_SIZE = 64 * 1024


def to_bytes(chunk: Any) -> bytes:
    if isinstance(chunk, str):
        return chunk.encode("utf-8")
    if isinstance(chunk, (bytes, bytearray, memoryview)):
        return bytes(chunk)
    raise TypeError(f"Stream yielded unsupported chunk type {type(chunk).__name__}")


def is_buffer(content: Any) -> bool:
    return isinstance(content, (str, bytes, bytearray, memoryview))


def _has_async_read(obj: Any) -> bool:
    return inspect.iscoroutinefunction(getattr(obj, "read", None))


def _has_sync_read(obj: Any) -> bool:
    return callable(getattr(obj, "read", None)) and not _has_async_read(obj)


def is_stream(content: Any) -> bool:
    return _has_async_read(content) or _has_sync_read(content) or hasattr(content, "__aiter__")


async def iter_stream(stream: Any, chunk_size: int = CHUNK_SIZE) -> AsyncIterator[bytes]:
    """Yield the chunks of a byte source in order.

    Sources with an awaitable ``read(size)`` (``asyncio.StreamReader``,
    starlette's ``UploadFile``) or a blocking one (``io.BytesIO``, files opened
    with ``open()``) are read until they return an empty chunk; blocking reads
    run in a worker thread. Anything else is consumed with ``async for``.
    """
    if _has_async_read(stream):
        while True:
            chunk = await stream.read(chunk_size)
            if not chunk:
                return
            yield to_bytes(chunk)
    elif _has_sync_read(stream):
        while True:
            chunk = await asyncio.to_thread(stream.read, chunk_size)
            if not chunk:
                return
            yield to_bytes(chunk)
    else:
        async for chunk in stream:
            yield to_bytes(chunk)


async def drain_to_file(stream: Any, path: str | Path) -> None:
    fh = await asyncio.to_thread(open, path, "wb")
    try:
        async for chunk in iter_stream(stream):
            await asyncio.to_thread(fh.write, chunk)
    finally:
        await asyncio.to_thread(fh.close)
