# merge_sort.py
# Stable top-down merge sort over DataCount entries, driven by a
# cmp-style comparator: comparator(a, b) < 0 means a sorts before b.

from __future__ import annotations
from typing import Callable, List, Sequence, TypeVar

from wordcount.core.data_count import DataCount

T = TypeVar("T")
Comparator = Callable[[T, T], int]


def merge_sort(items: Sequence[T], comparator: Comparator) -> List[T]:
    """
    Return a new list with items sorted by comparator. The input is left
    untouched. Elements comparing equal keep their input order.
    """
    if len(items) <= 1:
        return list(items)
    mid = len(items) // 2
    left = merge_sort(items[:mid], comparator)
    right = merge_sort(items[mid:], comparator)
    return _merge(left, right, comparator)


def _merge(left: List[T], right: List[T], comparator: Comparator) -> List[T]:
    out: List[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # <= takes from the left half on ties, which is what keeps the sort stable
        if comparator(left[i], right[j]) <= 0:
            out.append(left[i])
            i += 1
        else:
            out.append(right[j])
            j += 1
    out.extend(left[i:])
    out.extend(right[j:])
    return out


# comparators -----------------------------------------------------------------
def by_count_desc(a: DataCount, b: DataCount) -> int:
    return b.count - a.count


def by_key_asc(a: DataCount, b: DataCount) -> int:
    if a.key < b.key:
        return -1
    if a.key > b.key:
        return 1
    return 0


def frequency_order(counts: Sequence[DataCount]) -> List[DataCount]:
    """
    Count descending, ties broken by key ascending.
    Done as two passes: key order first, then a stable sort by count so the
    key order survives among equal counts.
    """
    return merge_sort(merge_sort(counts, by_key_asc), by_count_desc)


def lexicographic_order(counts: Sequence[DataCount]) -> List[DataCount]:
    return merge_sort(counts, by_key_asc)
