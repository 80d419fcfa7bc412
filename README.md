# timemachinelogs

A small archiver for directories full of log files. When packing, it finds
files with identical content and stores each distinct piece of content only
once. It groups files by size first, then hashes those of the same size with
SHA-256. Unpacking restores every file at its original relative path.

## Installation

```
pip install .
```

## Command line

Pack a directory into an archive:

```
timemachinelogs --mode pack --input /path/to/directory --output logs.archive
```

Unpack an archive into a directory:

```
timemachinelogs --mode unpack --input logs.archive --output /path/to/directory
```

The short options `-m`, `-i` and `-o` do the same job. `python -m
timemachinelogs.cli` runs the same command. The mode is matched without
regard to case, so `pack`, `Pack` and `PACK` all work. `--help` lists the
options, and `-v`/`--version` prints `Time Machine Logs 1.0`.

The command exits with status 1 in these cases:

* one of the three options is missing (a usage example goes to standard
  error);
* the mode is neither `pack` nor `unpack`;
* packing or unpacking raises `ArchiveError`.

If the input given for packing is not an existing directory, the command
prints the error to standard error and exits with status 0.

Packing creates the archive's parent directory if it is missing. Unpacking
creates the output directory if needed. It overwrites files that are already
there.

## Library use

```python
from timemachinelogs.collector import FileCollector
from timemachinelogs.archiver import ArchiveError, pack, unpack

collector = FileCollector("/var/log/myapp")
index = pack("myapp.archive", collector.unique_files, collector.duplicate_groups)
restored = unpack("myapp.archive", "/tmp/restored")
```

The modules are these:

* `timemachinelogs.collector.FileCollector(root_path)` scans the tree when it
  is created. It raises `NotADirectoryError` if `root_path` is not an existing
  directory. Its properties are:
  * `unique_files`: a list of `FileEntry`;
  * `duplicate_groups`: a list of lists of `FileEntry` with the same content.
* `timemachinelogs.entries.FileEntry` is a dataclass with `name`, `path`
  (absolute), `relative_path` (with forward slashes), `size` and `hash`.
  `FileEntry.from_path(path, root)` builds one from a file on disk.
* `timemachinelogs.hashing.calculate_hash(path, algorithm="sha256")` returns
  the digest of a file. It returns empty bytes if the file cannot be read.
* `timemachinelogs.archiver`:
  * `pack(archive_path, unique_files, duplicate_groups, chunk_size=4 MiB)`
    writes an archive and returns the list of `FileMeta` records it wrote.
  * `unpack(archive_path, output_dir, chunk_size=4 MiB)` restores the files
    and returns the records it read.
  * Both raise `ArchiveError` on failure.
* `timemachinelogs.modes.Mode` is an enum with `PACK`, `UNPACK` and
  `UNKNOWN`. `Mode.parse(text)` matches a mode without regard to case and
  returns `UNKNOWN` when nothing matches.

## Archive layout

All integers are big-endian.

1. The file contents, one after another. Each group of duplicates is written
   once.
2. The metadata index, which begins with an int64 record count. Each record
   then holds:
   * the relative path, as a uint32 byte length followed by UTF-16BE text;
   * the int64 size;
   * the hash, as a uint32 length followed by the bytes. An empty hash is
     written as `0xFFFFFFFF` with no bytes. Files that occur only once are
     stored without a hash.
   * the int64 offset of the file's content.
3. An int64 footer that gives the offset of the index.

## Limitations

* Contents are stored uncompressed.
* Only regular files are archived. Empty directories, permissions and
  timestamps are not kept.
* An archive made from a directory with no files cannot be unpacked.
  Unpacking reports "No files stored in archive."
* Unpacking does not check the stored hashes against the restored contents.