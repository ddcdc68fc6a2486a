"""
selection_sort.py — Selection Sort
====================================
For each position, scan the rest of the array for the minimum and swap it
into place.  Exactly one swap per outer iteration, and only when the
minimum actually moved.
"""

from typing import Generator, List, Sequence

from algorithms.step import SortStep


PSEUDOCODE: List[str] = [
    "def SelectionSort(a):",                        # 0
    "    for i in 0 .. n-2:",                       # 1
    "        min ← i",                              # 2
    "        for j in i+1 .. n-1:",                 # 3
    "            if a[j] < a[min]: min ← j",        # 4
    "        if min != i: swap(a[i], a[min])",      # 5
    "        mark a[i] sorted",                     # 6
]


def selection_sort(array: Sequence[int]) -> Generator[SortStep, None, None]:
    a = list(array)
    n = len(a)
    if n <= 1:
        yield SortStep.sorted(0, n, a)
        return

    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            yield SortStep.compare(min_idx, j, a)
            if a[j] < a[min_idx]:
                min_idx = j
        if min_idx != i:
            a[i], a[min_idx] = a[min_idx], a[i]
            yield SortStep.swap(i, min_idx, a)
        yield SortStep.sorted(i, i + 1, a)

    # the last element is in place once every other one is
    yield SortStep.sorted(n - 1, n, a)
    yield SortStep.sorted(0, n, a)
