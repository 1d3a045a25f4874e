from __future__ import annotations

import dataclasses
import enum

RESET = "\033[0m"


class ColorBand(enum.Enum):
    PINK = "\033[38;5;205m"
    GREEN = "\033[32m"
    LIGHT_GREEN = "\033[38;5;118m"
    YELLOW = "\033[33m"
    TEAL = "\033[38;5;51m"
    NONE = RESET

    @classmethod
    def for_percentage(cls, percentage: float) -> "ColorBand":
        if percentage > 75:
            return cls.PINK
        if percentage > 60:
            return cls.GREEN
        if percentage > 50:
            return cls.LIGHT_GREEN
        if percentage > 25:
            return cls.YELLOW
        if percentage > 0:
            return cls.TEAL
        return cls.NONE


@dataclasses.dataclass(frozen=True)
class AuthorStat:
    email: str
    count: int
    percentage: float

    @property
    def band(self) -> ColorBand:
        return ColorBand.for_percentage(self.percentage)


@dataclasses.dataclass(frozen=True)
class TreeOptions:
    show_files: bool = False
    color: bool = True
    keep_going: bool = False


@dataclasses.dataclass
class TreeResult:
    failures: list[tuple[str, str]] = dataclasses.field(default_factory=list)  # (path, detail)
