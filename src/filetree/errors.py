from __future__ import annotations


class FiletreeError(Exception):
    pass


class IgnoreFileError(FiletreeError):
    def __init__(self, path: str, cause: OSError) -> None:
        super().__init__(f"error loading {path}: {cause}")
        self.path = path
        self.cause = cause


class BlameError(FiletreeError):
    def __init__(self, path: str, detail: str) -> None:
        super().__init__(f"git blame failed for {path}: {detail}")
        self.path = path
        self.detail = detail
