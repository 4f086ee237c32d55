"""Quicksort and selection sort on lists."""

from __future__ import annotations

from typing import Iterable, List, MutableSequence, Tuple, TypeVar

T = TypeVar("T")


def partition(values: MutableSequence[T], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around ``values[low]`` in place.

    Returns the final index of the pivot: everything left of it is not
    greater than the pivot, everything right of it is greater.
    """
    if not 0 <= low <= high < len(values):
        raise IndexError(f"range {low}..{high} outside sequence of {len(values)}")
    pivot = values[low]
    i, j = low, high
    while i < j:
        while i <= high and values[i] <= pivot:
            i += 1
        while values[j] > pivot:
            j -= 1
        if i < j:
            values[i], values[j] = values[j], values[i]
    values[low], values[j] = values[j], values[low]
    return j


def quicksort(values: Iterable[T]) -> List[T]:
    """Return a new ascending list sorted by quicksort."""
    result = list(values)
    pending: List[Tuple[int, int]] = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            j = partition(result, low, high)
            pending.append((j + 1, high))
            pending.append((low, j - 1))
    return result


def selection_sort(values: Iterable[T]) -> List[T]:
    """Return a new ascending list sorted by selection sort."""
    result = list(values)
    for i in range(len(result) - 1):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        if smallest != i:
            result[i], result[smallest] = result[smallest], result[i]
    return result