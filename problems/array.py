"""
array.py — Sorting Race Input
===============================
Random integer arrays for the sorting race.  Values stay in a range
that renders well as bar heights.
"""

import random
from typing import List, Optional


MIN_VALUE = 5
MAX_VALUE = 100


def generate_array(array_size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Return `array_size` integers drawn uniformly from [MIN_VALUE, MAX_VALUE]."""
    if array_size < 1:
        raise ValueError(f"array_size must be at least 1, got {array_size}")
    rng = rng if rng is not None else random
    return [rng.randint(MIN_VALUE, MAX_VALUE) for _ in range(array_size)]
