from __future__ import annotations

from typing import Iterable

from .core import OutputFileError, Writer
from .defaults import NO_FILES_NOTICE


def _nonempty(paths: Iterable[str]) -> list[str]:
    return [p for p in paths if p]


def print_paths(paths: list[str], writer: Writer) -> None:
    entries = _nonempty(paths)
    if not entries:
        writer.write(NO_FILES_NOTICE + "\n")
        return
    for entry in entries:
        writer.write(entry + "\n")


def write_paths(paths: list[str], output: str) -> int:
    """Create or truncate `output` and write one path per line. Returns the number of lines written."""
    entries = _nonempty(paths)
    try:
        f = open(output, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        msg = f"error creating output file: {e}"
        raise OutputFileError(msg) from e
    with f:
        for entry in entries:
            f.write(entry + "\n")
    return len(entries)
