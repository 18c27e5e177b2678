from __future__ import annotations

import logging
import sys
from typing import TextIO

from rich.console import Console

from .adapters.filesystem import DirectorySource
from .adapters.git import GitRepoSource
from .cli_common import Context, parse_common_args, read_repo_urls, select_mode
from .core import EnumerationResult, JeloxError, Mode, SourceAdapter, StdoutWriter, Writer
from .defaults import BANNER, NO_ARGS_NOTICE, USAGE
from .sink import print_paths, write_paths

logger = logging.getLogger("jelox")


class Notices:
    """Colored, human-facing status lines. Collected paths never go through here."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def _print(self, text: str, style: str | None = None) -> None:
        # Surrogate escapes cannot be encoded by the console; show them as U+FFFD.
        text = text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")
        self.console.print(text, style=style, markup=False, highlight=False, soft_wrap=True)

    def banner(self) -> None:
        for line in BANNER:
            self._print(line, "cyan")

    def usage(self) -> None:
        self._print(USAGE.rstrip("\n"))

    def info(self, text: str) -> None:
        self._print(text)

    def processing(self, text: str) -> None:
        self._print(text, "magenta")

    def warning(self, text: str) -> None:
        self._print(f"Warning: {text}", "yellow")

    def error(self, text: str) -> None:
        self._print(f"Error: {text}", "red")


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers; the package level still applies.
    logger.setLevel(level)


def _report(result: EnumerationResult, notices: Notices) -> list[str]:
    for warning in result.warnings:
        notices.warning(warning)
    if not result.ok:
        notices.error(str(result.error))
        return []
    return result.paths


def collect(
    ctx: Context,
    notices: Notices,
    *,
    repo_source: SourceAdapter,
    dir_source: SourceAdapter,
    stdin: TextIO | None = None,
) -> list[str] | None:
    """
    Run the enumeration selected by `ctx` and return the collected paths.

    Every failed enumeration is reported and contributes nothing; in list mode the
    remaining URLs are still processed. Returns None when the URL list itself
    cannot be read.
    """
    mode = select_mode(ctx)
    if mode is Mode.URL:
        notices.processing(f"Processing single repo: {ctx.url}")
        return _report(repo_source.enumerate(ctx.url), notices)

    if mode is Mode.DIRECTORY:
        notices.processing(f"Processing directory: {ctx.directory}")
        return _report(dir_source.enumerate(ctx.directory), notices)

    try:
        repos = read_repo_urls(ctx.list_file, stdin=stdin)
    except JeloxError as e:
        notices.info(f"Error reading input: {e}")
        return None
    files: list[str] = []
    for repo_url in repos:
        notices.processing(f"Processing repo: {repo_url}")
        files.extend(_report(repo_source.enumerate(repo_url), notices))
    return files


def main(
    *,
    argv: list[str] | None = None,
    writer: Writer | None = None,
    console: Console | None = None,
    stdin: TextIO | None = None,
    repo_source: SourceAdapter | None = None,
    dir_source: SourceAdapter | None = None,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    ctx: Context = parse_common_args(argv)
    notices = Notices(console or Console(no_color=ctx.no_color, highlight=False))
    notices.banner()

    if not argv:
        notices.info(NO_ARGS_NOTICE)
        notices.usage()
        return 0
    if ctx.show_help:
        notices.usage()
        return 0

    _configure_logging(ctx.verbose)
    files = collect(
        ctx,
        notices,
        repo_source=repo_source or GitRepoSource(),
        dir_source=dir_source or DirectorySource(notify=notices.info),
        stdin=stdin,
    )
    if files is None:
        return 0

    print_paths(files, writer or StdoutWriter())

    if ctx.output:
        try:
            written = write_paths(files, ctx.output)
        except JeloxError as e:
            notices.error(str(e))
            return 0
        logger.debug("wrote %d paths to %s", written, ctx.output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
