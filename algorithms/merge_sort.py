"""
merge_sort.py — Merge Sort (top-down)
=======================================
Split [lo, hi] at mid = (lo + hi) // 2, sort the left half completely,
then the right half, then merge.

Each merge:
  1. copies a[lo..hi] into the auxiliary buffer
  2. yields partition((lo, mid), (mid+1, hi))
  3. fills a[lo..hi] one slot at a time:
       both halves non-empty → compare(i, j) then update
       one half exhausted    → update only
  4. yields sorted(0, n) if [lo, hi] is the whole array,
     otherwise merged(lo, hi+1)

compare(i, j) indices point into the buffer, i.e. at the ORIGINAL
positions of the two candidates inside the range being merged.
"""

from typing import Generator, List, Sequence

from algorithms.step import SortStep


PSEUDOCODE: List[str] = [
    "def MergeSort(a, lo, hi):",                    # 0
    "    if lo >= hi: return",                      # 1
    "    mid ← (lo + hi) // 2",                     # 2
    "    MergeSort(a, lo, mid)",                    # 3
    "    MergeSort(a, mid+1, hi)",                  # 4
    "    aux[lo..hi] ← a[lo..hi]",                  # 5
    "    for k in lo .. hi:",                       # 6
    "        take the smaller head of the halves",  # 7
]


def merge_sort(array: Sequence[int]) -> Generator[SortStep, None, None]:
    a = list(array)
    n = len(a)
    if n <= 1:
        yield SortStep.sorted(0, n, a)
        return

    aux = list(a)
    yield from _merge_sort(a, aux, 0, n - 1, n)


def _merge_sort(
    a: List[int], aux: List[int], lo: int, hi: int, n: int,
) -> Generator[SortStep, None, None]:
    if lo >= hi:
        return
    mid = (lo + hi) // 2
    yield from _merge_sort(a, aux, lo, mid, n)
    yield from _merge_sort(a, aux, mid + 1, hi, n)
    yield from _merge(a, aux, lo, mid, hi, n)


def _merge(
    a: List[int], aux: List[int], lo: int, mid: int, hi: int, n: int,
) -> Generator[SortStep, None, None]:
    for k in range(lo, hi + 1):
        aux[k] = a[k]
    yield SortStep.partition((lo, mid), (mid + 1, hi), a)

    i, j = lo, mid + 1
    for k in range(lo, hi + 1):
        if i > mid:
            a[k] = aux[j]
            j += 1
        elif j > hi:
            a[k] = aux[i]
            i += 1
        else:
            yield SortStep.compare(i, j, a)
            if aux[i] <= aux[j]:
                a[k] = aux[i]
                i += 1
            else:
                a[k] = aux[j]
                j += 1
        yield SortStep.update(a)

    if lo == 0 and hi == n - 1:
        yield SortStep.sorted(0, n, a)
    else:
        yield SortStep.merged(lo, hi + 1, a)
