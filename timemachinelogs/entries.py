"""Description of a single file found under a scanned directory."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePath


@dataclass
class FileEntry:
    """A file with its location, size and (once computed) content hash."""

    name: str
    path: str
    relative_path: str
    size: int
    hash: bytes = b""

    @classmethod
    def from_path(cls, path: str | os.PathLike, root: str | os.PathLike) -> "FileEntry":
        """Describe the file at ``path``, with its location relative to ``root``."""
        absolute = os.path.abspath(path)
        relative = os.path.relpath(absolute, os.path.abspath(root))
        return cls(
            name=Path(absolute).name,
            path=absolute,
            relative_path=PurePath(relative).as_posix(),
            size=os.stat(absolute).st_size,
        )