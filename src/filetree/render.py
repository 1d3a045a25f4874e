from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from typing import TextIO

from .aggregate import calculate_stats, merge_counts
from .config import DEFAULT_EXCLUDE_DIRNAMES
from .errors import BlameError
from .git import blame_authors
from .models import RESET, AuthorStat, TreeOptions, TreeResult
from .paths import matches_ignore, relative_key

BRANCH = "├── "
PIPE = "│   "
SPACE = "    "


def format_percentage(author: AuthorStat, *, color: bool) -> str:
    pct = f"{author.percentage:.1f}%"
    if not color:
        return pct
    return f"{author.band.value}{pct}{RESET}"


def format_stat_line(prefix: str, author: AuthorStat, *, color: bool = True) -> str:
    return f"{prefix}{PIPE}{BRANCH}{author.email} ({format_percentage(author, color=color)})"


def format_node_line(prefix: str, name: str) -> str:
    return f"{prefix}{BRANCH}{name}"


def _list_children(path: Path) -> list[tuple[str, bool]]:
    with os.scandir(path) as it:
        children = [(e.name, e.is_dir(follow_symlinks=False)) for e in it]
    children.sort(key=lambda c: c[0])
    return children


def print_tree(root: Path, *, patterns: list[str], options: TreeOptions, out: TextIO | None = None) -> TreeResult:
    """
    Print `root` and everything below it that the ignore patterns do not
    exclude, annotated with blame percentages.

    Raises OSError for filesystem failures and BlameError for a file git
    cannot attribute (unless `options.keep_going`).
    """
    result = TreeResult()
    _print_dir(
        root,
        root=root,
        prefix="",
        patterns=patterns,
        options=options,
        out=out if out is not None else sys.stdout,
        result=result,
    )
    return result


def _print_dir(
    path: Path,
    *,
    root: Path,
    prefix: str,
    patterns: list[str],
    options: TreeOptions,
    out: TextIO,
    result: TreeResult,
) -> None:
    st = path.stat()
    if not stat.S_ISDIR(st.st_mode) or matches_ignore(relative_key(root, path), patterns):
        return

    print(format_node_line(prefix, path.name), file=out)

    visible: list[tuple[Path, bool]] = []
    for name, is_dir in _list_children(path):
        child = path / name
        if name in DEFAULT_EXCLUDE_DIRNAMES:
            continue
        if matches_ignore(relative_key(root, child), patterns):
            continue
        visible.append((child, is_dir))

    dir_counts: dict[str, int] = {}
    dir_total = 0

    for i, (child, is_dir) in enumerate(visible):
        child_prefix = prefix + (SPACE if i == len(visible) - 1 else PIPE)

        if is_dir:
            _print_dir(
                child,
                root=root,
                prefix=child_prefix,
                patterns=patterns,
                options=options,
                out=out,
                result=result,
            )
            continue

        try:
            counts, total = blame_authors(child)
        except BlameError as e:
            if not options.keep_going:
                raise
            key = relative_key(root, child)
            result.failures.append((key, e.detail))
            print(f"Warning: skipping {key}: {e.detail}", file=sys.stderr)
            continue

        if options.show_files:
            stats = calculate_stats(counts, total)
            if not stats:
                continue
            print(format_node_line(child_prefix, child.name), file=out)
            for s in stats:
                print(format_stat_line(child_prefix, s, color=options.color), file=out)
        else:
            dir_total += merge_counts(dir_counts, counts)

    if not options.show_files and dir_total > 0:
        for s in calculate_stats(dir_counts, dir_total):
            print(format_stat_line(prefix, s, color=options.color), file=out)
