"""Read-only file storage used by the pipeline."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol, Union

from .types import FileStat

PathLike = Union[str, Path]


class FileStorage(Protocol):
    """Minimal storage surface the pipeline consumes. The core never writes."""

    def exists(self, path: PathLike) -> bool:
        ...

    def stat(self, path: PathLike) -> FileStat:
        ...

    def read_file(self, path: PathLike) -> bytes:
        ...


class LocalFileStorage:
    """Storage backed by the local filesystem."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).is_file() and os.access(path, os.R_OK)

    def stat(self, path: PathLike) -> FileStat:
        return FileStat(size=Path(path).stat().st_size)

    def read_file(self, path: PathLike) -> bytes:
        # Read fully before parsing; the handle is closed on every exit path.
        with open(path, "rb") as handle:
            return handle.read()


__all__ = ["FileStorage", "LocalFileStorage", "PathLike"]
