from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np

from quoridor_fences.config import BoardConfig


class GridTable:
    """
    DP table over (last row signature, cumulative fence count).

    `GridTable[sig, k]` is the number of ways to fill some prefix of the
    board's rows so that the last row's vertical signature is `sig` and `k`
    fences were placed in total. Cells hold Python ints inside a numpy
    object array, so counts never lose precision however large they grow.
    """
    __slots__ = ("_config", "_counts")

    def __init__(self, config: BoardConfig):
        self._config = config
        self._counts = np.zeros((config.signature_dimension, config.fence_dimension), dtype=object)

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def shape(self) -> Tuple[int, int]:
        return self._counts.shape

    def get(self, signature: int, fence_count: int) -> int:
        return self._counts[signature, fence_count]

    def __getitem__(self, key: Tuple[int, int]) -> int:
        signature, fence_count = key
        return self.get(signature, fence_count)

    def set(self, signature: int, fence_count: int, value: int) -> None:
        self._counts[signature, fence_count] = value

    def set_signature_row(self, signature: int, values: Sequence[int]) -> None:
        """Overwrites every fence count cell of one signature."""
        if len(values) != self._config.fence_dimension:
            raise ValueError(
                f"Expected {self._config.fence_dimension} values for signature {signature}, got {len(values)}"
            )
        for fence_count, value in enumerate(values):
            self._counts[signature, fence_count] = value

    def clear(self) -> None:
        """Resets every cell to the Python int 0."""
        self._counts.fill(0)

    def seed(self) -> None:
        """Base case with zero rows filled: one way, empty signature, no fences."""
        self.clear()
        self._counts[0, 0] = 1

    def to_lists(self) -> List[List[int]]:
        """Copies the table out as nested lists of Python ints."""
        return self._counts.tolist()

    def column_totals(self) -> List[int]:
        """Sum over all signatures for each fence count 0..F."""
        return [sum(column) for column in self._counts.T.tolist()]

    def total(self) -> int:
        return sum(self.column_totals())


@dataclass(slots=True)
class GridBufferPair:
    """
    Two preallocated grid tables with swappable previous/current roles.

    The driver reads `previous`, writes `current`, then calls `swap()` so the
    freshly written table becomes the input for the next row.
    """
    previous: GridTable
    current: GridTable

    @classmethod
    def allocate(cls, config: BoardConfig) -> "GridBufferPair":
        return cls(previous=GridTable(config), current=GridTable(config))

    def swap(self) -> None:
        self.previous, self.current = self.current, self.previous
