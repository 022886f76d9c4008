"""Ordering of process snapshots for display."""

from collections.abc import Iterable
from functools import cmp_to_key

from proctop.models import ProcessSnapshot, Ranking


def compare_by_memory(a: ProcessSnapshot, b: ProcessSnapshot) -> int:
    """Order by resident memory, largest first. Equal memory compares equal."""
    if a.rss_kb > b.rss_kb:
        return -1
    if a.rss_kb < b.rss_kb:
        return 1
    return 0


def rank(processes: Iterable[ProcessSnapshot], capacity: int = 25) -> Ranking:
    """
    Sort processes by memory descending and keep the first `capacity`.

    The order of processes with equal memory is not defined.
    """
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    ordered = sorted(processes, key=cmp_to_key(compare_by_memory))
    return Ranking(processes=tuple(ordered[:capacity]), total=len(ordered))
