from __future__ import annotations

import io
import shutil
import subprocess
from pathlib import Path
from typing import Iterator

import pytest
from rich.console import Console

from utils import make_undecodable_file, touch_file, write_text_file


def _git(*args: str, cwd: Path) -> None:
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=jelox",
            "-c",
            "user.email=jelox@example.com",
            "-c",
            "commit.gpgsign=false",
            *args,
        ],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def console() -> Console:
    """A plain console whose output can be read back via `console.file.getvalue()`."""
    return Console(file=io.StringIO(), no_color=True, width=200)


@pytest.fixture
def wordlist_tree(tmp_path: Path) -> Path:
    """A small tree with nested, dotted and extensionless files."""
    base = tmp_path / "site"
    write_text_file(base / "index.php", "<?php echo 1;\n")
    write_text_file(base / "admin" / "login.php", "<?php\n")
    write_text_file(base / "admin" / "config" / "settings.ini", "debug=0\n")
    write_text_file(base / ".htaccess", "Deny from all\n")
    touch_file(base / "uploads" / "README")
    (base / "empty-dir").mkdir()
    return base


@pytest.fixture
def git_repo(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """A local git repository with one commit, cloneable by path."""
    if shutil.which("git") is None:
        pytest.skip("git binary not available")
    repo = tmp_path_factory.mktemp("origin")
    _git("init", "-q", str(repo), cwd=repo)
    write_text_file(repo / "README.md", "# origin\n")
    write_text_file(repo / "app" / "routes.py", "ROUTES = []\n")
    write_text_file(repo / "static" / "js" / "main.js", "console.log(1)\n")
    # Untracked files must not show up in a tracked-file listing
    _git("add", "README.md", "app/routes.py", "static/js/main.js", cwd=repo)
    _git("commit", "-q", "-m", "init", cwd=repo)
    write_text_file(repo / "untracked.txt", "not committed\n")
    yield repo


@pytest.fixture
def undecodable_repo(tmp_path_factory: pytest.TempPathFactory) -> tuple[Path, str]:
    """A committed repository holding one file whose name is not valid UTF-8."""
    if shutil.which("git") is None:
        pytest.skip("git binary not available")
    repo = tmp_path_factory.mktemp("latin1-origin")
    _git("init", "-q", str(repo), cwd=repo)
    name = make_undecodable_file(repo)
    _git("add", "-A", cwd=repo)
    _git("commit", "-q", "-m", "init", cwd=repo)
    return repo, name
