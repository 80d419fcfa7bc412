"""Scanning a directory tree and sorting its files into unique ones and duplicates."""

from __future__ import annotations

import os
from dataclasses import replace

from .entries import FileEntry
from .hashing import calculate_hash


class FileCollector:
    """Walks a directory and groups the files it holds by identical content."""

    def __init__(self, root_path: str | os.PathLike) -> None:
        self._root_path = os.fspath(root_path)
        if not os.path.isdir(self._root_path):
            raise NotADirectoryError(f"Invalid directory: {self._root_path}")
        self._unique_files: list[FileEntry] = []
        self._duplicate_groups: list[list[FileEntry]] = []
        self._scan()

    @property
    def unique_files(self) -> list[FileEntry]:
        """Files whose content occurs once in the tree."""
        return self._unique_files

    @property
    def duplicate_groups(self) -> list[list[FileEntry]]:
        """Groups of two or more files sharing the same content."""
        return self._duplicate_groups

    def _walk(self):
        for directory, dirnames, filenames in os.walk(self._root_path):
            dirnames.sort()
            for filename in sorted(filenames):
                full = os.path.join(directory, filename)
                if os.path.isfile(full):
                    yield FileEntry.from_path(full, self._root_path)

    def _scan(self) -> None:
        size_groups: dict[int, list[FileEntry]] = {}
        for entry in self._walk():
            size_groups.setdefault(entry.size, []).append(entry)

        for same_size in size_groups.values():
            if len(same_size) == 1:
                self._unique_files.append(same_size[0])
                continue

            hash_groups: dict[bytes, list[FileEntry]] = {}
            for entry in same_size:
                hashed = replace(entry, hash=calculate_hash(entry.path))
                hash_groups.setdefault(hashed.hash, []).append(hashed)

            for same_hash in hash_groups.values():
                if len(same_hash) == 1:
                    self._unique_files.append(same_hash[0])
                else:
                    self._duplicate_groups.append(same_hash)