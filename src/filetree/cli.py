from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .config import load_ignore_patterns
from .errors import FiletreeError
from .models import TreeOptions
from .render import print_tree


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filetree",
        description="Print the current directory as a tree annotated with git blame authorship percentages.",
    )
    parser.add_argument("-f", "--files", dest="show_files", action="store_true", help="Show files in directory tree.")
    parser.add_argument("--no-color", action="store_true", help="Print percentages without ANSI colors (also set by NO_COLOR).")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip files git cannot blame instead of stopping at the first one.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def options_from_args(args: argparse.Namespace) -> TreeOptions:
    no_color = bool(args.no_color) or bool(os.environ.get("NO_COLOR", ""))
    return TreeOptions(
        show_files=bool(args.show_files),
        color=not no_color,
        keep_going=bool(args.keep_going),
    )


def _tolerate_undecodable_names() -> None:
    # Names that are not valid UTF-8 arrive as lone surrogates from os.scandir.
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="backslashreplace")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = _build_parser().parse_args(argv)
    options = options_from_args(args)
    _tolerate_undecodable_names()

    try:
        root = Path(os.getcwd())
    except OSError as e:
        print(f"Error getting current directory: {e}")
        return 1

    try:
        patterns = load_ignore_patterns(root)
    except FiletreeError as e:
        print(f"Error loading ignore patterns: {e}")
        return 1

    try:
        result = print_tree(root, patterns=patterns, options=options)
    except (FiletreeError, OSError) as e:
        print(f"Error printing directory tree: {e}")
        return 1

    if result.failures:
        print(f"Warning: {len(result.failures)} file(s) could not be blamed:", file=sys.stderr)
        for path, detail in result.failures:
            print(f"- {path}: {detail}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
