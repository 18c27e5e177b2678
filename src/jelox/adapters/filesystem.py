from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable

from ..core import (
    DirectoryNotFoundError,
    EnumerationResult,
    JeloxError,
    ListingError,
    PathResolutionError,
    RelativePathError,
    SourceAdapter,
)
from ..types import TRelPath

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


def _is_windows() -> bool:
    return os.name == "nt"


def listing_command(root: Path, *, windows: bool) -> list[str]:
    if windows:
        # /A-D leaves directories out, matching `find -type f`
        return ["cmd", "/C", "dir", "/B", "/S", "/A-D", str(root)]
    return ["find", str(root), "-type", "f"]


class DirectorySource(SourceAdapter):
    """Lists every regular file under a local directory, relative to that directory."""

    def __init__(
        self,
        root_cwd: Path | None = None,
        runner: Runner | None = None,
        windows: bool | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self._cwd = Path.cwd() if root_cwd is None else Path(root_cwd)
        self._run_process = runner or subprocess.run
        self._windows = _is_windows() if windows is None else windows
        self._notify = notify

    def enumerate(self, target: str) -> EnumerationResult:
        try:
            root = self.resolve_root(target)
            if self._notify is not None:
                self._notify(f"Processing directory: {root}")
            raw = self._list(root)
            paths = self._relativize(raw, root)
        except JeloxError as e:
            return EnumerationResult.failure(target, e)
        return EnumerationResult(source=str(root), paths=paths)

    def resolve_root(self, root_spec: str) -> Path:
        candidate = self._cwd / root_spec
        if not candidate.exists():
            msg = f"directory does not exist: {root_spec}"
            raise DirectoryNotFoundError(msg)
        try:
            return candidate.resolve(strict=True)
        except (OSError, RuntimeError) as e:
            msg = f"error getting absolute directory path for {root_spec}: {e}"
            raise PathResolutionError(msg) from e

    def _list(self, root: Path) -> list[str]:
        args = listing_command(root, windows=self._windows)
        logger.debug("running %s", " ".join(args))
        try:
            proc = self._run_process(
                args,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="surrogateescape",
            )
        except OSError as e:
            msg = f"error listing files in directory {root}: {e}"
            raise ListingError(msg) from e
        if proc.returncode != 0:
            stderr = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
            msg = f"error listing files in directory {root}: {stderr}"
            raise ListingError(msg)
        return (proc.stdout or "").splitlines()

    def _relativize(self, lines: list[str], root: Path) -> list[TRelPath]:
        paths: list[TRelPath] = []
        for line in lines:
            if not line:
                continue
            try:
                paths.append(os.path.relpath(line, start=root))
            except ValueError as e:
                # Windows: entry on a different drive than the root
                msg = f"error calculating relative path for {line}: {e}"
                raise RelativePathError(msg) from e
        return paths
