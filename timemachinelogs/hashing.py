"""Content hashing of files."""

from __future__ import annotations

import hashlib
import os

_BUFFER_SIZE = 8192


def calculate_hash(path: str | os.PathLike, algorithm: str = "sha256") -> bytes:
    """Return the digest of the file at ``path``, or empty bytes if it cannot be read."""
    hasher = hashlib.new(algorithm)
    try:
        with open(path, "rb") as stream:
            for chunk in iter(lambda: stream.read(_BUFFER_SIZE), b""):
                hasher.update(chunk)
    except OSError:
        return b""
    return hasher.digest()