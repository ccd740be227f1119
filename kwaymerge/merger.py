"""K-way merging of integer lists."""

from __future__ import annotations

import heapq
import os
from collections.abc import Iterable, Sequence

from kwaymerge.intlist import IntList


def merge_sorted(lists: Iterable[Iterable[int]]) -> list[int]:
    """Merge sorted integer sequences into one sorted list.

    A priority queue holds the current head of every sequence; once only
    one sequence is left, its remainder is appended at once. Ties go to
    the sequence that comes first.
    """
    cursors = [IntList(values) for values in lists]
    merged: list[int] = []
    heap = [(cursor.advance(), i) for i, cursor in enumerate(cursors) if not cursor.exhausted()]
    heapq.heapify(heap)

    while heap:
        value, i = heapq.heappop(heap)
        merged.append(value)
        if not heap:
            merged.extend(cursors[i].remaining())
            break
        if not cursors[i].exhausted():
            heapq.heappush(heap, (cursors[i].advance(), i))
    return merged


class ListCollection:
    """A collection of integer lists that can be merged into one."""

    def __init__(self, lists: Iterable[Iterable[int]]) -> None:
        self.lists = [
            lst if isinstance(lst, IntList) else IntList(lst) for lst in lists
        ]

    @classmethod
    def from_files(cls, paths: Sequence[str | os.PathLike[str]]) -> ListCollection:
        """Load one list from each file."""
        return cls(IntList.from_file(path) for path in paths)

    def total_size(self) -> int:
        """Number of values across all lists."""
        return sum(len(lst) for lst in self.lists)

    def merge(self) -> IntList:
        """Merge all lists into one sorted list."""
        return IntList(merge_sorted(self.lists))