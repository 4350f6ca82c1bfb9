from __future__ import annotations
from typing import List, Optional, Tuple
import logging

from quoridor_fences.structures import GridTable, RowTable
from quoridor_fences.utils.bit_utils import iter_compatible_signatures

logger = logging.getLogger(__name__)


def add_row(
    previous: GridTable,
    row_table: RowTable,
    row_index: int,
    current: Optional[GridTable] = None,
) -> GridTable:
    """
    Extends every counted board prefix by one more row.

    For each new signature `s` and total fence count `k <= F`::

        current[s, k] = sum(previous[p, f] * row_table[s, a])

    over previous signatures `p` compatible with `s` (no bit in common, see
    `iter_compatible_signatures`) and fence splits `f + a == k` with
    `a <= C`. Zero cells on either side are skipped so no big-int
    multiplication is spent on them.

    Parameters
    ----------
    previous : GridTable
        Counts for the first `row_index` rows. Only read.
    row_table : RowTable
        Single-row counts from `enumerate_rows`. Only read.
    row_index : int
        Number of rows already filled in `previous`. At most
        `row_index * C` fences can have been placed so far, which bounds the
        previous fence counts scanned.
    current : Optional[GridTable], optional
        Destination buffer. It is cleared before accumulation. A new table is
        allocated when omitted.

    Returns
    -------
    GridTable
        The destination table holding counts for `row_index + 1` rows.
    """
    # ---------- 0. Validate inputs ----------
    # Both tables must describe the same board width, and the destination must
    # not alias the source since it is cleared before anything is read.
    config = previous.config
    if row_table.column_count != config.column_count:
        raise ValueError(
            f"Row table has {row_table.column_count} columns but the grid expects {config.column_count}"
        )
    if current is None:
        current = GridTable(config)
    elif current is previous:
        raise ValueError("add_row needs distinct previous and current tables")

    max_fence_count = config.max_fence_count
    max_signature = config.max_vertical_signature
    # `row_index` full rows hold at most C fences each; F caps it regardless.
    max_prev_fence_count = min(row_index * config.column_count, max_fence_count)

    # ---------- 1. Collect the non-zero terms of both operands ----------
    # Zero cells contribute nothing, so only (fence_count, ways) pairs with
    # ways != 0 are kept. Both lists hold Python ints.
    prev_terms = _nonzero_prefix_terms(previous, max_prev_fence_count)
    row_terms = row_table.nonzero_terms()

    # ---------- 2. Accumulate each destination signature ----------
    current.clear()
    for new_signature in range(config.signature_dimension):
        new_row_terms = row_terms[new_signature]
        if not new_row_terms:
            continue

        # One accumulator per total fence count 0..F for this signature.
        acc = [0] * config.fence_dimension

        # Previous rows whose vertical fences avoid every column of `new_signature`.
        for prev_signature in iter_compatible_signatures(new_signature, max_signature):
            # Every reachable fence count of that previous prefix.
            for prev_fence_count, prev_ways in prev_terms[prev_signature]:
                # Every way the new row realises `new_signature`, by fences added.
                for added_fence_count, row_ways in new_row_terms:
                    fence_count = prev_fence_count + added_fence_count
                    # Row terms ascend by fence count, so nothing later fits either.
                    if fence_count > max_fence_count:
                        break
                    acc[fence_count] += prev_ways * row_ways

        # ---------- 3. Write the finished signature row ----------
        current.set_signature_row(new_signature, acc)

    return current


def _nonzero_prefix_terms(table: GridTable, max_fence_count: int) -> List[List[Tuple[int, int]]]:
    """Per-signature `(fence_count, ways)` pairs for non-zero cells up to `max_fence_count`."""
    return [
        [(fence_count, ways) for fence_count, ways in enumerate(cells[:max_fence_count + 1]) if ways != 0]
        for cells in table.to_lists()
    ]
