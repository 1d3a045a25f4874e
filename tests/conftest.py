from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Each line of a blamed file is the email of the author that "wrote" it.
# Files ending in `.untracked` make the fake git fail like a real untracked path.
FAKE_GIT = """#!{python}
import os
import sys
from pathlib import Path


def main() -> int:
    args = sys.argv[1:]
    if not args or args[0] != "blame":
        return 2
    name = args[-1]
    log = os.environ.get("FAKE_GIT_LOG", "")
    if log:
        with open(log, "a", encoding="utf-8") as fh:
            fh.write(str(Path.cwd() / name) + "\\n")
    p = Path(name)
    if p.suffix == ".untracked" or not p.exists():
        sys.stderr.write(f"fatal: no such path '{{name}}' in HEAD\\n")
        return 128
    for i, line in enumerate(p.read_text(encoding="utf-8").splitlines(), 1):
        sys.stdout.write(f"{{'0' * 40}} {{i}} {{i}} 1\\n")
        sys.stdout.write("author Someone\\n")
        sys.stdout.write(f"author-mail <{{line.strip()}}>\\n")
        sys.stdout.write("summary init\\n")
        sys.stdout.write(f"filename {{name}}\\n")
        sys.stdout.write(f"\\t{{line}}\\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""


@pytest.fixture
def fake_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Put a fake `git` first on PATH; returns the file that logs blamed paths."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "git"
    script.write_text(FAKE_GIT.format(python=sys.executable), encoding="utf-8")
    script.chmod(0o755)
    log = tmp_path / "blamed.log"
    log.write_text("", encoding="utf-8")
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
    monkeypatch.setenv("FAKE_GIT_LOG", str(log))
    monkeypatch.delenv("NO_COLOR", raising=False)
    return log


@pytest.fixture
def proj(tmp_path: Path) -> Path:
    root = tmp_path / "proj"
    root.mkdir()
    return root


def write_authored(path: Path, lines: list[str]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
