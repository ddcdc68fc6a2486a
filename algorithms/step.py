"""
step.py — Sorting Step Snapshot
================================
Every sorting algorithm is a generator that yields SortStep objects.
A SortStep is a frozen-in-time picture of one atomic event:

    • compare(i, j)              – two indices are being compared
    • swap(i, j)                 – two indices were exchanged
    • sorted(start, end)         – [start, end) is now in its final place
    • update()                   – array written without a compare / swap (merge)
    • partition(left, right)     – two inclusive sub-ranges about to be merged
    • merged(start, end)         – [start, end) merged, not yet globally final

Design decisions:
  - Every step carries a FULL snapshot of the array, not a diff.  Any step
    index can be rendered without replaying the ones before it.
  - The snapshot is a tuple so a step can never be mutated after the
    algorithm yielded it.
  - Fields that do not apply to a kind stay None; `to_dict()` drops them
    so the JSON matches the tagged shape the renderer expects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple


# ---------------------------------------------------------------------------
# Step kinds
# ---------------------------------------------------------------------------
class StepKind(Enum):
    COMPARE   = "compare"
    SWAP      = "swap"
    SORTED    = "sorted"
    UPDATE    = "update"
    PARTITION = "partition"
    MERGED    = "merged"


Range = Tuple[int, int]


@dataclass(frozen=True)
class SortStep:
    """
    Attributes:
        kind   : Which event this is.
        array  : Snapshot of the whole array right after the event.
        i, j   : Indices involved (compare / swap).
        start  : Range start, inclusive (sorted / merged).
        end    : Range end, exclusive (sorted / merged).
        left   : Inclusive (lo, hi) of the left half (partition).
        right  : Inclusive (lo, hi) of the right half (partition).
    """

    kind:   StepKind
    array:  Tuple[int, ...]
    i:      Optional[int]   = None
    j:      Optional[int]   = None
    start:  Optional[int]   = None
    end:    Optional[int]   = None
    left:   Optional[Range] = None
    right:  Optional[Range] = None

    # -- constructors: each one snapshots the array --
    @classmethod
    def compare(cls, i: int, j: int, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.COMPARE, tuple(array), i=i, j=j)

    @classmethod
    def swap(cls, i: int, j: int, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.SWAP, tuple(array), i=i, j=j)

    @classmethod
    def sorted(cls, start: int, end: int, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.SORTED, tuple(array), start=start, end=end)

    @classmethod
    def update(cls, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.UPDATE, tuple(array))

    @classmethod
    def partition(cls, left: Range, right: Range, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.PARTITION, tuple(array), left=tuple(left), right=tuple(right))

    @classmethod
    def merged(cls, start: int, end: int, array: Sequence[int]) -> "SortStep":
        return cls(StepKind.MERGED, tuple(array), start=start, end=end)

    # -- helpers --
    @property
    def indices(self) -> Tuple[int, ...]:
        """Indices highlighted by a compare / swap, empty otherwise."""
        if self.kind in (StepKind.COMPARE, StepKind.SWAP):
            return (self.i, self.j)
        return ()

    def covers_all(self) -> bool:
        """True for the `sorted(0, n)` step that closes every trace."""
        return (
            self.kind is StepKind.SORTED
            and self.start == 0
            and self.end == len(self.array)
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.kind.value}
        for name in ("i", "j", "start", "end"):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        if self.left is not None:
            data["left"] = list(self.left)
            data["right"] = list(self.right)
        data["array"] = list(self.array)
        return data
