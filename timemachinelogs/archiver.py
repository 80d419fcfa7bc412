"""Writing and reading archives that store each distinct file content once.

Layout of an archive, all integers big-endian:

* the raw contents of the stored files, one after another;
* the metadata index: an int64 entry count, then for every entry a string
  (uint32 byte length followed by UTF-16BE text), the int64 file size, a
  byte string (uint32 length followed by the bytes, ``0xFFFFFFFF`` when
  empty) holding the content hash, and the int64 offset of the content;
* an int64 footer giving the offset at which the metadata index starts.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import BinaryIO

from .entries import FileEntry

DEFAULT_CHUNK_SIZE = 4 * 1024 * 1024

_INT64 = struct.Struct(">q")
_UINT32 = struct.Struct(">I")
_NULL_LENGTH = 0xFFFFFFFF


class ArchiveError(Exception):
    """Raised when an archive cannot be written or read."""


@dataclass(frozen=True)
class FileMeta:
    """Index entry describing one file stored in an archive."""

    relative_path: str
    size: int
    hash: bytes
    data_offset: int


def _encode_string(text: str) -> bytes:
    data = text.encode("utf-16-be")
    return _UINT32.pack(len(data)) + data


def _encode_bytes(data: bytes) -> bytes:
    if not data:
        return _UINT32.pack(_NULL_LENGTH)
    return _UINT32.pack(len(data)) + data


def _encode_metadata(metadata: Sequence[FileMeta]) -> bytes:
    parts = [_INT64.pack(len(metadata))]
    for meta in metadata:
        parts.append(_encode_string(meta.relative_path))
        parts.append(_INT64.pack(meta.size))
        parts.append(_encode_bytes(meta.hash))
        parts.append(_INT64.pack(meta.data_offset))
    return b"".join(parts)


def _read_exact(stream: BinaryIO, count: int) -> bytes:
    data = stream.read(count)
    if len(data) != count:
        raise ArchiveError("Unexpected end of archive while reading metadata.")
    return data


def _read_int64(stream: BinaryIO) -> int:
    return _INT64.unpack(_read_exact(stream, _INT64.size))[0]


def _read_length_prefixed(stream: BinaryIO) -> bytes:
    (length,) = _UINT32.unpack(_read_exact(stream, _UINT32.size))
    if length == _NULL_LENGTH:
        return b""
    return _read_exact(stream, length)


def _read_string(stream: BinaryIO) -> str:
    raw = _read_length_prefixed(stream)
    try:
        return raw.decode("utf-16-be")
    except UnicodeDecodeError as exc:
        raise ArchiveError("Malformed file name in archive metadata.") from exc


def _copy_into(archive: BinaryIO, source_path: str, chunk_size: int) -> None:
    try:
        source = open(source_path, "rb")
    except OSError as exc:
        raise ArchiveError(f"Cannot open file for reading: {source_path}") from exc
    with source:
        for chunk in iter(lambda: source.read(chunk_size), b""):
            try:
                archive.write(chunk)
            except OSError as exc:
                raise ArchiveError(
                    f"Failed writing to archive for file: {source_path}"
                ) from exc


def _write_unique_files(
    archive: BinaryIO, unique_files: Iterable[FileEntry], chunk_size: int
) -> list[FileMeta]:
    metadata = []
    for entry in unique_files:
        offset = archive.tell()
        _copy_into(archive, entry.path, chunk_size)
        # Unique files carry no hash.
        metadata.append(FileMeta(entry.relative_path, entry.size, b"", offset))
    return metadata


def _write_duplicate_files(
    archive: BinaryIO,
    duplicate_groups: Iterable[Sequence[FileEntry]],
    chunk_size: int,
) -> list[FileMeta]:
    metadata = []
    offsets_by_hash: dict[bytes, int] = {}
    for group in duplicate_groups:
        if not group:
            continue
        source = group[0]
        offset = offsets_by_hash.get(source.hash)
        if offset is None:
            offset = archive.tell()
            _copy_into(archive, source.path, chunk_size)
            offsets_by_hash[source.hash] = offset
        metadata.extend(
            FileMeta(entry.relative_path, entry.size, entry.hash, offset)
            for entry in group
        )
    return metadata


def _validate_archive_path_for_pack(path: str) -> None:
    if os.path.isdir(path):
        raise ArchiveError(
            f"Invalid archive file path provided - path points to a directory: {path}"
        )
    parent = os.path.dirname(path) or "."
    try:
        os.makedirs(parent, exist_ok=True)
    except OSError as exc:
        raise ArchiveError(
            f"Failed to create directory for archive file path: {os.path.abspath(parent)}"
        ) from exc
    if not os.path.basename(path):
        raise ArchiveError(
            f"Invalid archive file path provided - missing file name: {path}"
        )


def _validate_archive_path_for_unpack(path: str) -> None:
    if not os.path.exists(path):
        raise ArchiveError(f"Archive file does not exist: {path}")
    if not os.path.isfile(path):
        raise ArchiveError(f"Archive path is not a file: {path}")


def _validate_output_dir_for_unpack(path: str) -> None:
    if os.path.exists(path) and not os.path.isdir(path):
        raise ArchiveError(
            f"Provided output path exists but is not a directory: {path}"
        )
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as exc:
        raise ArchiveError(
            f"Failed to create output directory: {os.path.abspath(path)}"
        ) from exc


def _read_metadata_offset(archive: BinaryIO) -> int:
    size = os.fstat(archive.fileno()).st_size
    if size < _INT64.size:
        raise ArchiveError("Archive file too small to contain metadata offset.")
    archive.seek(size - _INT64.size)
    offset = _read_int64(archive)
    if offset < 0 or offset >= size:
        raise ArchiveError("Invalid metadata offset.")
    return offset


def _read_metadata(archive: BinaryIO) -> list[FileMeta]:
    count = _read_int64(archive)
    if count <= 0:
        raise ArchiveError("No files stored in archive.")
    metadata = []
    for _ in range(count):
        relative_path = _read_string(archive)
        size = _read_int64(archive)
        digest = _read_length_prefixed(archive)
        offset = _read_int64(archive)
        metadata.append(FileMeta(relative_path, size, digest, offset))
    return metadata


def _extract_file(
    archive: BinaryIO, meta: FileMeta, output_dir: str, chunk_size: int
) -> None:
    output_path = os.path.join(output_dir, meta.relative_path)
    try:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        target = open(output_path, "wb")
    except OSError as exc:
        raise ArchiveError(f"Cannot create file: {output_path}") from exc
    with target:
        archive.seek(meta.data_offset)
        remaining = meta.size
        while remaining > 0:
            chunk = archive.read(min(remaining, chunk_size))
            if not chunk:
                raise ArchiveError(
                    f"Unexpected end of archive while reading {meta.relative_path}"
                )
            try:
                target.write(chunk)
            except OSError as exc:
                raise ArchiveError(f"Failed writing file: {output_path}") from exc
            remaining -= len(chunk)


def pack(
    archive_path: str | os.PathLike,
    unique_files: Iterable[FileEntry],
    duplicate_groups: Iterable[Sequence[FileEntry]],
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[FileMeta]:
    """Write an archive holding the given files; return the index written."""
    path = os.fspath(archive_path)
    _validate_archive_path_for_pack(path)
    try:
        archive = open(path, "wb")
    except OSError as exc:
        raise ArchiveError(f"Cannot open archive file for writing: {path}") from exc
    with archive:
        metadata = _write_unique_files(archive, unique_files, chunk_size)
        metadata += _write_duplicate_files(archive, duplicate_groups, chunk_size)
        metadata_offset = archive.tell()
        archive.write(_encode_metadata(metadata))
        archive.write(_INT64.pack(metadata_offset))
    return metadata


def unpack(
    archive_path: str | os.PathLike,
    output_dir: str | os.PathLike,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> list[FileMeta]:
    """Restore every file of an archive under ``output_dir``; return the index read."""
    path = os.fspath(archive_path)
    target_dir = os.fspath(output_dir)
    _validate_archive_path_for_unpack(path)
    _validate_output_dir_for_unpack(target_dir)
    try:
        archive = open(path, "rb")
    except OSError as exc:
        raise ArchiveError(f"Cannot open archive: {path}") from exc
    with archive:
        archive.seek(_read_metadata_offset(archive))
        metadata = _read_metadata(archive)
        for meta in metadata:
            _extract_file(archive, meta, target_dir, chunk_size)
    return metadata