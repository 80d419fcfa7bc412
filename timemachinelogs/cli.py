"""Command-line entry point: pack a directory or unpack an archive."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from .archiver import ArchiveError, pack, unpack
from .collector import FileCollector
from .modes import (
    APPLICATION_DESCRIPTION,
    APPLICATION_NAME,
    APPLICATION_VERSION,
    INPUT_DESCRIPTION,
    INPUT_LONG,
    INPUT_SHORT,
    MODE_DESCRIPTION,
    MODE_LONG,
    MODE_PACK,
    MODE_SHORT,
    MODE_UNPACK,
    OUTPUT_DESCRIPTION,
    OUTPUT_LONG,
    OUTPUT_SHORT,
    Mode,
)


def build_parser() -> argparse.ArgumentParser:
    """Create the parser for the program's options."""
    parser = argparse.ArgumentParser(description=APPLICATION_DESCRIPTION)
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"{APPLICATION_NAME} {APPLICATION_VERSION}",
    )
    for short, long, description in (
        (MODE_SHORT, MODE_LONG, MODE_DESCRIPTION),
        (INPUT_SHORT, INPUT_LONG, INPUT_DESCRIPTION),
        (OUTPUT_SHORT, OUTPUT_LONG, OUTPUT_DESCRIPTION),
    ):
        parser.add_argument(
            f"-{short}", f"--{long}", dest=long, metavar=long, help=description
        )
    return parser


def _error(*parts: object) -> None:
    print(*parts, file=sys.stderr)


def _report_missing_arguments(prog: str) -> None:
    _error("Error: Missing required arguments")
    _error("Usage examples:")
    _error(
        f"  {prog} --{MODE_LONG} {MODE_PACK} --{INPUT_LONG} /path/to/directory"
        f" --{OUTPUT_LONG} archive.zip"
    )
    _error(
        f"  {prog} --{MODE_LONG} {MODE_UNPACK} --{INPUT_LONG} archive.zip"
        f" --{OUTPUT_LONG} /path/to/directory"
    )
    _error("")
    _error("Use --help for more information")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    mode_text = getattr(args, MODE_LONG)
    source = getattr(args, INPUT_LONG)
    target = getattr(args, OUTPUT_LONG)

    if mode_text is None or source is None or target is None:
        _report_missing_arguments(parser.prog)
        return 1

    mode = Mode.parse(mode_text)
    if not mode.is_valid():
        _error(f"Error: Invalid mode. Use '{MODE_PACK}' or '{MODE_UNPACK}'")
        return 1

    try:
        if mode is Mode.PACK:
            collector = FileCollector(source)
            try:
                pack(target, collector.unique_files, collector.duplicate_groups)
            except ArchiveError as exc:
                _error(exc)
                _error("Failed to pack the archive:", target)
                return 1
        elif mode is Mode.UNPACK:
            try:
                unpack(source, target)
            except ArchiveError as exc:
                _error(exc)
                _error("Failed to unpack the archive:", source)
                return 1
    except OSError as exc:
        _error("An exception occured while running the program:", exc)

    return 0


if __name__ == "__main__":
    sys.exit(main())