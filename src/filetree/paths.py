from __future__ import annotations

import fnmatch
import os
import re
from pathlib import Path


def _to_posix(path: str) -> str:
    # Only the platform separator; `\` is a legal name character on POSIX.
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def base_name(path: str) -> str:
    p = _to_posix(path).rstrip("/")
    return p.rsplit("/", 1)[-1]


def _glob_match(name: str, pattern: str) -> bool:
    try:
        return fnmatch.fnmatchcase(name, pattern)
    except re.error:
        return False


def matches_ignore(path: str, patterns: list[str]) -> bool:
    base = base_name(path)
    p = _to_posix(path)
    for pat in patterns:
        if not pat:
            continue
        if _glob_match(base, pat):
            return True
        if pat.endswith("/"):
            stem = pat[:-1]
            if p == stem or p.startswith(stem + "/"):
                return True
        if base == pat:
            return True
    return False


def relative_key(root: Path, path: Path) -> str:
    """Key used for matching: POSIX path relative to `root`, or root's own name."""
    if path == root:
        return root.name
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()
