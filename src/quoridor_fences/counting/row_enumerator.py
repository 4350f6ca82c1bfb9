from __future__ import annotations
from enum import Enum
from typing import Iterator, List, Sequence, Tuple
import logging

from quoridor_fences.structures import RowTable
from quoridor_fences.utils.bit_utils import format_signature

logger = logging.getLogger(__name__)

# Listing arrangements walks every legal row (roughly 2.7**C of them), so it is
# only offered for narrow rows.
MAX_LISTED_ROW_COLUMNS = 12

Arrangement = Tuple["ColumnChoice", ...]


class ColumnChoice(Enum):
    """What a single column position of a row can hold."""
    EMPTY = "."
    VERTICAL = "|"
    HORIZONTAL = "-"


def enumerate_rows(column_count: int) -> RowTable:
    """
    Counts every legal single-row fence arrangement by signature and fence count.

    Each of the `column_count` positions is left empty, given a vertical
    fence, or given a horizontal fence. A horizontal fence is two cells wide,
    so two neighbouring positions cannot both hold one; the first position
    has no left neighbour and may always take a horizontal fence.

    Parameters
    ----------
    column_count : int
        Number of positions in the row (C).

    Returns
    -------
    RowTable
        `table[sig, k]` = number of arrangements with vertical signature `sig`
        using exactly `k` fences.

    Examples
    --------
    With 8 columns, `table[17, 4] == 11`: the vertical fences at columns 0 and
    4 leave two horizontal fences to place among the six free positions
    without making them adjacent.
    """
    table = RowTable(column_count)
    _fill_from(table, column_count, position=0, signature=0, fence_count=0, last_was_horizontal=False)

    logger.debug(f"Row enumeration for C={column_count}: {table.total():,} arrangements")
    return table

def _fill_from(
    table: RowTable,
    column_count: int,
    position: int,
    signature: int,
    fence_count: int,
    last_was_horizontal: bool,
) -> None:
    """Depth-first search over the remaining positions, tallying at the leaves."""
    # Every position is decided: record this arrangement in its table cell.
    if position == column_count:
        table.increment(signature, fence_count)
        return

    # ---------- 1. EMPTY ----------
    # Always allowed; leaves the signature and fence count unchanged.
    _fill_from(table, column_count, position + 1, signature, fence_count, False)

    # ---------- 2. VERTICAL ----------
    # Always allowed; sets this position's signature bit and adds a fence.
    _fill_from(table, column_count, position + 1, signature | (1 << position), fence_count + 1, False)

    # ---------- 3. HORIZONTAL ----------
    # Adds a fence without touching the signature, but only when the previous
    # position was not horizontal too. Position 0 has no left neighbour.
    if not last_was_horizontal:
        _fill_from(table, column_count, position + 1, signature, fence_count + 1, True)


def _check_listable(column_count: int) -> None:
    if column_count > MAX_LISTED_ROW_COLUMNS:
        raise ValueError(
            f"Listing row arrangements is limited to {MAX_LISTED_ROW_COLUMNS} columns, got {column_count}"
        )


def iter_row_arrangements(column_count: int) -> Iterator[Arrangement]:
    """
    Yields every legal row as a tuple of `ColumnChoice`, in search order.

    Useful for inspecting which arrangements make up a given table cell; the
    counting path uses `enumerate_rows`, which never materialises them.

    Raises
    ------
    ValueError
        If `column_count` exceeds `MAX_LISTED_ROW_COLUMNS`.
    """
    _check_listable(column_count)

    # Each stack entry is a partial row and whether its last choice was horizontal.
    stack: List[Tuple[Arrangement, bool]] = [((), False)]
    while stack:
        choices, last_was_horizontal = stack.pop()

        # A complete row: hand it out and backtrack.
        if len(choices) == column_count:
            yield choices
            continue

        # Pushed in reverse so EMPTY is explored first, matching `enumerate_rows`.
        if not last_was_horizontal:
            stack.append((choices + (ColumnChoice.HORIZONTAL,), True))
        stack.append((choices + (ColumnChoice.VERTICAL,), False))
        stack.append((choices + (ColumnChoice.EMPTY,), False))


def describe_arrangement(choices: Sequence[ColumnChoice]) -> str:
    """Renders an arrangement as e.g. `-.-|...|`."""
    return "".join(choice.value for choice in choices)


def arrangements_for(column_count: int, signature: int, fence_count: int) -> List[str]:
    """
    Lists the rendered arrangements counted in `table[signature, fence_count]`.

    Parameters
    ----------
    column_count : int
        Number of positions in the row, at most `MAX_LISTED_ROW_COLUMNS`.
    signature : int
        The vertical signature to match.
    fence_count : int
        The number of fences to match.

    Returns
    -------
    List[str]
        One rendering per matching arrangement, in search order.
    """
    matches = []
    for choices in iter_row_arrangements(column_count):
        # Recompute the row's fence count and vertical signature from its choices.
        placed = sum(choice is not ColumnChoice.EMPTY for choice in choices)
        sig = sum(1 << i for i, choice in enumerate(choices) if choice is ColumnChoice.VERTICAL)
        if sig == signature and placed == fence_count:
            matches.append(describe_arrangement(choices))

    logger.debug(
        f"{len(matches)} arrangements for signature {format_signature(signature, column_count)} "
        f"with {fence_count} fences"
    )
    return matches
