from __future__ import annotations

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest


def write_text_file(path: Path, content: str) -> None:
    """Create parents and write UTF-8 text to a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def touch_file(path: Path) -> None:
    """Create parents as needed and touch a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()


class FakeGit:
    """
    Stands in for `subprocess.run` when driving GitRepoSource without a network.

    Clones of URLs in `failing` (and of the empty URL) exit with git's usual
    "repository not found" diagnostics. Listings come from `listings` keyed by the
    URL most recently cloned, falling back to `default_listing`.
    """

    def __init__(
        self,
        *,
        default_listing: str = "README.md\nsrc/app.py\n",
        listings: dict[str, str] | None = None,
        failing: tuple[str, ...] = (),
        list_returncode: int = 0,
    ) -> None:
        self.default_listing = default_listing
        self.listings = listings or {}
        self.failing = failing
        self.list_returncode = list_returncode
        self.calls: list[tuple[list[str], str | None]] = []
        self.scratch_dirs: list[str] = []
        self._last_url = ""

    def __call__(self, args, cwd=None, **kwargs) -> subprocess.CompletedProcess:
        args = list(args)
        self.calls.append((args, cwd))
        if "clone" in args:
            url = args[args.index("--") + 1]
            self.scratch_dirs.append(args[-1])
            self._last_url = url
            if not url or url in self.failing:
                return subprocess.CompletedProcess(
                    args, 128, "", f"fatal: repository '{url}' does not exist\n"
                )
            return subprocess.CompletedProcess(args, 0, "", "")
        if self.list_returncode != 0:
            return subprocess.CompletedProcess(
                args, self.list_returncode, "", "fatal: Not a valid object name HEAD\n"
            )
        listing = self.listings.get(self._last_url, self.default_listing)
        return subprocess.CompletedProcess(args, 0, listing, "")


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")
requires_find = pytest.mark.skipif(
    os.name == "nt" or shutil.which("find") is None, reason="POSIX find not available"
)


def make_undecodable_file(directory: Path, raw_name: bytes = b"caf\xe9.php") -> str:
    """Create a file whose name is not valid UTF-8 and return that name as the OS decodes it."""
    if os.name == "nt" or sys.platform == "darwin":
        pytest.skip("filesystem does not accept non-UTF-8 file names")
    name = os.fsdecode(raw_name)
    try:
        (directory / name).write_bytes(b"")
    except (OSError, UnicodeEncodeError):
        pytest.skip("filesystem does not accept non-UTF-8 file names")
    return name
