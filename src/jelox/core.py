from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol


class Mode(Enum):
    URL = auto()
    DIRECTORY = auto()
    LIST = auto()


# region ---[ Errors ]---


class JeloxError(Exception):
    """Base for every failure an enumeration or the sink can report."""


class ScratchCreateError(JeloxError):
    pass


class CloneError(JeloxError):
    pass


class ListingError(JeloxError):
    pass


class ScratchRemoveError(JeloxError):
    pass


class DirectoryNotFoundError(JeloxError):
    pass


class PathResolutionError(JeloxError):
    pass


class RelativePathError(JeloxError):
    pass


class OutputFileError(JeloxError):
    pass


class InputFileError(JeloxError):
    pass


# endregion ---[ Errors ]---


@dataclass(slots=True)
class EnumerationResult:
    """
    Outcome of enumerating one source (a repository URL or a directory).

    A failed enumeration carries `error` and no paths. Warnings are problems that
    did not invalidate the listing, e.g. a scratch directory that could not be removed.
    """

    source: str
    paths: list[str] = field(default_factory=list)
    error: JeloxError | None = None
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(cls, source: str, error: JeloxError) -> EnumerationResult:
        return cls(source=source, error=error)


class SourceAdapter(Protocol):
    def enumerate(self, target: str) -> EnumerationResult: ...


class Writer(Protocol):
    def write(self, text: str) -> None: ...


class StdoutWriter(Writer):
    def write(self, text: str) -> None:
        try:
            sys.stdout.write(text)
        except UnicodeEncodeError:
            # Undecodable file names arrive as surrogate escapes; emit their original bytes.
            sys.stdout.flush()
            encoding = sys.stdout.encoding or "utf-8"
            sys.stdout.buffer.write(text.encode(encoding, errors="surrogateescape"))
            sys.stdout.buffer.flush()


class StringWriter(Writer):
    """
    Collects written text into an internal buffer for tests and callers.

    Provides a lightweight Writer implementation that accumulates text and
    exposes it via the `text()` accessor.
    """

    def __init__(self) -> None:
        self._parts: list[str] = []

    def write(self, text: str) -> None:  # Writer protocol
        self._parts.append(text)

    def text(self) -> str:
        return "".join(self._parts)

    def lines(self) -> list[str]:
        return self.text().splitlines()
