from __future__ import annotations
from typing import List, Tuple

import numpy as np

# (added_fence_count, ways) pairs for one signature
RowTerms = List[Tuple[int, int]]


class RowTable:
    """
    Counts of single-row fence arrangements by vertical signature and fence count.

    `RowTable[sig, k]` is the number of ways one isolated row can be filled so
    that its vertical signature is `sig` while placing exactly `k` fences. A
    row never holds more than `column_count` fences and never more than 3**C
    arrangements, so a fixed-width integer array stores it exactly.
    """
    __slots__ = ("_column_count", "_counts")

    def __init__(self, column_count: int):
        self._column_count = column_count
        self._counts = np.zeros((1 << column_count, column_count + 1), dtype=np.int64)

    @property
    def column_count(self) -> int:
        return self._column_count

    @property
    def shape(self) -> Tuple[int, int]:
        return self._counts.shape

    def get(self, signature: int, fence_count: int) -> int:
        return int(self._counts[signature, fence_count])

    def __getitem__(self, key: Tuple[int, int]) -> int:
        signature, fence_count = key
        return self.get(signature, fence_count)

    def increment(self, signature: int, fence_count: int) -> None:
        self._counts[signature, fence_count] += 1

    def total(self) -> int:
        """Number of distinct single-row arrangements."""
        return int(self._counts.sum())

    def nonzero_terms(self) -> List[RowTerms]:
        """
        Per-signature list of `(added_fence_count, ways)` for non-zero cells.

        Pairs are in ascending fence count order and hold Python ints, so the
        products formed from them during convolution are unbounded.
        """
        return [
            [(added, ways) for added, ways in enumerate(cells) if ways != 0]
            for cells in self._counts.tolist()
        ]
