"""
quick_sort.py — Quick Sort (Lomuto)
=====================================
Lomuto partition with the last element of the range as pivot.  Recurses
left then right, so the trace finalises pivots roughly left to right.

Yields:
  compare(j, hi)        for every element tested against the pivot
  swap(i, j)            for every exchange that moves data
  swap(i, hi)           when the pivot moves to its resting index
  sorted(p, p+1)        for each pivot, and for every singleton range
  sorted(0, n)          at the very end

Exchanges of an element with itself are not emitted: nothing moves, so
there is nothing to animate.
"""

from typing import Generator, List, Sequence

from algorithms.step import SortStep


PSEUDOCODE: List[str] = [
    "def QuickSort(a, lo, hi):",                    # 0
    "    if lo >= hi: return",                      # 1
    "    pivot ← a[hi]; i ← lo - 1",                # 2
    "    for j in lo .. hi-1:",                     # 3
    "        if a[j] <= pivot:",                    # 4
    "            i ← i + 1; swap(a[i], a[j])",      # 5
    "    swap(a[i+1], a[hi])",                      # 6
    "    QuickSort(a, lo, i)",                      # 7
    "    QuickSort(a, i+2, hi)",                    # 8
]


def quick_sort(array: Sequence[int]) -> Generator[SortStep, None, None]:
    a = list(array)
    n = len(a)
    if n <= 1:
        yield SortStep.sorted(0, n, a)
        return

    yield from _quick_sort(a, 0, n - 1)
    yield SortStep.sorted(0, n, a)


def _quick_sort(a: List[int], lo: int, hi: int) -> Generator[SortStep, None, None]:
    if lo >= hi:
        if lo == hi:
            yield SortStep.sorted(lo, lo + 1, a)
        return

    pivot = a[hi]
    i = lo - 1
    for j in range(lo, hi):
        yield SortStep.compare(j, hi, a)
        if a[j] <= pivot:
            i += 1
            if i != j:
                a[i], a[j] = a[j], a[i]
                yield SortStep.swap(i, j, a)

    i += 1
    if i != hi:
        a[i], a[hi] = a[hi], a[i]
        yield SortStep.swap(i, hi, a)
    yield SortStep.sorted(i, i + 1, a)

    yield from _quick_sort(a, lo, i - 1)
    yield from _quick_sort(a, i + 1, hi)
