from __future__ import annotations

from pathlib import Path

from .errors import IgnoreFileError

# Read in this order; patterns are concatenated.
IGNORE_FILENAMES: tuple[str, ...] = (".gitignore", ".filetree.toml")

DEFAULT_EXCLUDE_DIRNAMES: frozenset[str] = frozenset({".git"})


def read_pattern_file(path: Path) -> list[str]:
    """
    Read one newline-delimited pattern list.

    Blank lines and `#` comments are skipped. A missing file yields no
    patterns; any other read failure is raised to the caller.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return []
    patterns: list[str] = []
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        patterns.append(line)
    return patterns


def load_ignore_patterns(root: Path) -> list[str]:
    patterns: list[str] = []
    for name in IGNORE_FILENAMES:
        try:
            patterns.extend(read_pattern_file(root / name))
        except OSError as e:
            raise IgnoreFileError(name, e) from e
    return patterns
