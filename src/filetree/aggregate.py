from __future__ import annotations

from collections.abc import Mapping

from .models import AuthorStat


def calculate_stats(counts: Mapping[str, int], total: int) -> list[AuthorStat]:
    if total <= 0:
        return []
    stats = [AuthorStat(email=email, count=int(n), percentage=n / total * 100) for email, n in counts.items()]
    stats.sort(key=lambda s: -s.count)
    return stats


def merge_counts(dst: dict[str, int], src: Mapping[str, int]) -> int:
    added = 0
    for email, n in src.items():
        dst[email] = dst.get(email, 0) + int(n)
        added += int(n)
    return added
