from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

from typeguard import typechecked

from .core import InputFileError, Mode
from .defaults import (
    DEFAULT_DIRECTORY,
    DEFAULT_LIST_FILE,
    DEFAULT_NO_COLOR,
    DEFAULT_OUTPUT,
    DEFAULT_URL,
    DEFAULT_VERBOSE,
)


@dataclass(slots=True)
class Context:
    output: str = DEFAULT_OUTPUT
    directory: str = DEFAULT_DIRECTORY
    list_file: str = DEFAULT_LIST_FILE
    url: str = DEFAULT_URL
    show_help: bool = False
    no_color: bool = DEFAULT_NO_COLOR
    verbose: bool = DEFAULT_VERBOSE


def build_parser() -> argparse.ArgumentParser:
    # -h is handled by the caller so the banner and usage come out the same way
    # whether help was asked for or no arguments were given.
    parser = argparse.ArgumentParser(
        prog="jelox",
        description="Collects file paths from git repositories or a local directory into a wordlist.",
        add_help=False,
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=DEFAULT_OUTPUT,
        help="Output file (default: %(default)s). An empty value disables writing.",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=str,
        default=DEFAULT_DIRECTORY,
        help="Directory to process.",
    )
    parser.add_argument(
        "-l",
        "--list",
        type=str,
        dest="list_file",
        default=DEFAULT_LIST_FILE,
        help="List file containing repository URLs. Read from stdin when no other source is given.",
    )
    parser.add_argument(
        "-u",
        "--url",
        type=str,
        default=DEFAULT_URL,
        help="Single repository URL to process.",
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        dest="show_help",
        help="Show help message.",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        default=DEFAULT_NO_COLOR,
        help="Disable colored notices.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=DEFAULT_VERBOSE,
        help="Log the commands run and the scratch directories used.",
    )
    return parser


def parse_common_args(argv: list[str] | None = None) -> Context:
    args = build_parser().parse_args(argv)
    return Context(
        output=args.output,
        directory=args.directory,
        list_file=args.list_file,
        url=args.url,
        show_help=bool(args.show_help),
        no_color=bool(args.no_color),
        verbose=bool(args.verbose),
    )


def select_mode(ctx: Context) -> Mode:
    """A single URL wins over a directory, which wins over a URL list (or stdin)."""
    if ctx.url:
        return Mode.URL
    if ctx.directory:
        return Mode.DIRECTORY
    return Mode.LIST


def _clean_lines(lines: Iterable[str]) -> list[str]:
    # Blank lines stay in place; they fail at clone time like any other bad URL.
    return [line.strip() for line in lines]


@typechecked
def read_repo_urls(list_file: str, stdin: TextIO | None = None) -> list[str]:
    """
    Read newline-delimited repository URLs from `list_file`, or from stdin when it is empty.

    Bytes that are not valid UTF-8 are carried through as surrogate escapes, so
    such a URL reaches `git clone` byte for byte.
    """
    if list_file:
        try:
            with open(list_file, encoding="utf-8", errors="surrogateescape") as f:
                return _clean_lines(f.read().splitlines())
        except OSError as e:
            msg = f"error opening list file: {e}"
            raise InputFileError(msg) from e
    try:
        if stdin is not None:
            text = stdin.read()
        else:
            text = sys.stdin.buffer.read().decode("utf-8", errors="surrogateescape")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"error reading standard input: {e}"
        raise InputFileError(msg) from e
    return _clean_lines(text.splitlines())
