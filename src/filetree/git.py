from __future__ import annotations

import subprocess
from collections import Counter
from pathlib import Path

from .errors import BlameError

AUTHOR_MAIL_PREFIX = "author-mail "


def run_git(args: list[str], cwd: Path, timeout_s: int | None = None) -> tuple[int, str, str]:
    proc = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        errors="replace",
        timeout=timeout_s,
    )
    return proc.returncode, proc.stdout, proc.stderr


def parse_author_mail(line: str) -> str:
    """
    `author-mail <dev@example.com>` -> `dev@example.com`.
    Returns "" for lines that are not author-mail headers.
    """
    if not line.startswith(AUTHOR_MAIL_PREFIX):
        return ""
    value = line[len(AUTHOR_MAIL_PREFIX) :].strip()
    if "<" in value:
        value = value.split("<", 1)[1]
        value = value.split(">", 1)[0]
    return value.strip()


def parse_line_porcelain(output: str) -> tuple[dict[str, int], int]:
    counts: Counter[str] = Counter()
    for line in output.splitlines():
        author = parse_author_mail(line)
        if author:
            counts[author] += 1
    return dict(counts), sum(counts.values())


def blame_authors(path: Path) -> tuple[dict[str, int], int]:
    """
    Attribute every line of `path` to an author email using
    `git blame --line-porcelain`.

    Returns (email -> line count, total lines). Raises BlameError when git
    is missing or exits non-zero; callers decide whether that is fatal.
    """
    try:
        code, out, err = run_git(
            ["blame", "--line-porcelain", "--", path.name],
            cwd=path.parent,
        )
    except OSError as e:
        raise BlameError(str(path), str(e)) from e
    if code != 0:
        detail = err.strip()[:500] or f"git exited {code}"
        raise BlameError(str(path), detail)
    return parse_line_porcelain(out)
