from __future__ import annotations

from pathlib import Path
import os
import shutil
import uuid


def unique_segment() -> str:
    return uuid.uuid4().hex


def unique_temp_path(directory: str | Path, suffix: str = "") -> Path:
    return Path(directory) / f"{unique_segment()}{suffix}"


def unique_temp_dir(directory: str | Path) -> Path:
    d = unique_temp_path(directory)
    d.mkdir(parents=True)
    return d


def remove_path(path: str | Path) -> None:
    """Delete a file or a directory tree. A missing path is not an error."""
    p = Path(path)
    if p.is_dir() and not p.is_symlink():
        shutil.rmtree(p)
    else:
        try:
            os.remove(p)
        except FileNotFoundError:
            pass
