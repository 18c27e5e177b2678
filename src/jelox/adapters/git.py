from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
import uuid
from pathlib import Path
from typing import Callable, Sequence

from typeguard import typechecked

from ..core import (
    CloneError,
    EnumerationResult,
    JeloxError,
    ListingError,
    ScratchCreateError,
    ScratchRemoveError,
    SourceAdapter,
)
from ..defaults import GIT_LIST_TRACKED, SCRATCH_NAMESPACE, SCRATCH_PREFIX
from ..types import TRelPath, TRepoURL

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


@typechecked
def clean_url(url: str) -> TRepoURL:
    return url.strip()


def _split_listing(stdout: str) -> list[TRelPath]:
    # git terminates every entry with a newline; the trailing empty piece is not a path
    return [line for line in stdout.split("\n") if line]


def _diagnostic(proc: subprocess.CompletedProcess) -> str:
    return (proc.stderr or "").strip() or f"exit status {proc.returncode}"


class GitRepoSource(SourceAdapter):
    """
    Clones a remote repository into a private scratch directory, lists the files
    tracked at HEAD, and removes the scratch directory again.
    """

    def __init__(
        self,
        scratch_base: Path | None = None,
        runner: Runner | None = None,
        git: str = "git",
    ) -> None:
        self._scratch_base = Path(tempfile.gettempdir()) if scratch_base is None else Path(scratch_base)
        self._run_process = runner or subprocess.run
        self._git = git

    def new_scratch_path(self) -> Path:
        return self._scratch_base / SCRATCH_NAMESPACE / f"{SCRATCH_PREFIX}{uuid.uuid4()}"

    def enumerate(self, target: str) -> EnumerationResult:
        url = clean_url(target)
        try:
            scratch = self._make_scratch()
        except ScratchCreateError as e:
            return EnumerationResult.failure(url, e)

        try:
            self._clone(url, scratch)
            paths = self._list_tracked(scratch)
        except JeloxError as e:
            shutil.rmtree(scratch, ignore_errors=True)
            return EnumerationResult.failure(url, e)

        result = EnumerationResult(source=url, paths=paths)
        try:
            self._remove_scratch(scratch)
        except ScratchRemoveError as e:
            # Paths are kept; only the scratch directory is left behind.
            logger.warning("%s", e)
            result.warnings.append(str(e))
        return result

    def _make_scratch(self) -> Path:
        scratch = self.new_scratch_path()
        try:
            scratch.mkdir(parents=True)
        except OSError as e:
            msg = f"error creating temp directory {scratch}: {e}"
            raise ScratchCreateError(msg) from e
        logger.debug("created scratch directory %s", scratch)
        return scratch

    def _run(self, args: Sequence[str], *, cwd: Path | None = None) -> subprocess.CompletedProcess:
        logger.debug("running %s", " ".join(args))
        env = dict(os.environ, GIT_TERMINAL_PROMPT="0")
        return self._run_process(
            list(args),
            cwd=None if cwd is None else str(cwd),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="surrogateescape",
            env=env,
        )

    def _clone(self, url: TRepoURL, scratch: Path) -> None:
        try:
            proc = self._run([self._git, "clone", "--", url, str(scratch)])
        except OSError as e:
            msg = f"error cloning repo {url!r}: {e}"
            raise CloneError(msg) from e
        if proc.returncode != 0:
            msg = f"error cloning repo {url!r}: {_diagnostic(proc)}"
            raise CloneError(msg)

    def _list_tracked(self, scratch: Path) -> list[str]:
        args = [self._git, "-c", "core.quotePath=false", *GIT_LIST_TRACKED]
        try:
            proc = self._run(args, cwd=scratch)
        except OSError as e:
            msg = f"error listing files: {e}"
            raise ListingError(msg) from e
        if proc.returncode != 0:
            msg = f"error listing files: {_diagnostic(proc)}"
            raise ListingError(msg)
        return _split_listing(proc.stdout or "")

    def _remove_scratch(self, scratch: Path) -> None:
        try:
            shutil.rmtree(scratch)
        except OSError as e:
            msg = f"error removing temp repo {scratch}: {e}"
            raise ScratchRemoveError(msg) from e
        logger.debug("removed scratch directory %s", scratch)
