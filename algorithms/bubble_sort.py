"""
bubble_sort.py — Bubble Sort
==============================
Adjacent-pair passes.  After pass i the largest i+1 values sit at the end
of the array, so each pass closes with a `sorted` step for that suffix.

Yields:
  compare(j, j+1)       before every comparison
  swap(j, j+1)          only when an inversion is fixed
  sorted(n-1-i, n)      after each pass
  sorted(0, n)          at the very end
"""

from typing import Generator, List, Sequence

from algorithms.step import SortStep


PSEUDOCODE: List[str] = [
    "def BubbleSort(a):",                           # 0
    "    for i in 0 .. n-2:",                       # 1
    "        for j in 0 .. n-2-i:",                 # 2
    "            if a[j] > a[j+1]:",                # 3
    "                swap(a[j], a[j+1])",           # 4
    "        mark a[n-1-i ..] sorted",              # 5
]


def bubble_sort(array: Sequence[int]) -> Generator[SortStep, None, None]:
    a = list(array)
    n = len(a)
    if n <= 1:
        yield SortStep.sorted(0, n, a)
        return

    for i in range(n - 1):
        for j in range(n - 1 - i):
            yield SortStep.compare(j, j + 1, a)
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                yield SortStep.swap(j, j + 1, a)
        yield SortStep.sorted(n - 1 - i, n, a)
    yield SortStep.sorted(0, n, a)
