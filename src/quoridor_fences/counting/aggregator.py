from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Tuple

from quoridor_fences.config import BoardConfig
from quoridor_fences.structures import GridTable


@dataclass(frozen=True, slots=True)
class FenceCountSummary:
    """
    Exact board counts per fence count.

    Attributes
    ----------
    config : BoardConfig
        The instance that was counted.
    per_fence_count : Tuple[int, ...]
        `per_fence_count[k]` is the number of boards with exactly `k` fences,
        for `k` in `0..F`.
    total : int
        Number of boards with at most `F` fences.
    """
    config: BoardConfig
    per_fence_count: Tuple[int, ...]
    total: int

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(enumerate(self.per_fence_count))


def aggregate(final_table: GridTable) -> FenceCountSummary:
    """
    Sums the final grid table over signatures.

    Parameters
    ----------
    final_table : GridTable
        The table returned by the grid driver.

    Returns
    -------
    FenceCountSummary
        One exact count per fence count plus the grand total over all cells.
    """
    config = final_table.config
    per_fence_count = [0] * config.fence_dimension
    total = 0

    for signature_cells in final_table.to_lists():
        for fence_count, ways in enumerate(signature_cells):
            per_fence_count[fence_count] += ways
            total += ways

    return FenceCountSummary(config=config, per_fence_count=tuple(per_fence_count), total=total)
