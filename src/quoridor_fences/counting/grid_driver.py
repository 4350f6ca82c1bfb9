from __future__ import annotations
from dataclasses import dataclass
import logging
import time

from tqdm import tqdm

from quoridor_fences.config import BoardConfig
from quoridor_fences.structures import GridBufferPair, GridTable, RowTable
from quoridor_fences.counting.row_enumerator import enumerate_rows
from quoridor_fences.counting.row_convolution import add_row
from quoridor_fences.utils.bit_utils import count_compatible_signatures

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FenceGridEngine:
    """
    Drives the row-by-row count over a whole board.

    The row table is built once; the grid tables are a preallocated pair
    whose roles swap after every row.

    Attributes
    ----------
    config : BoardConfig
        The board dimensions and fence ceiling.
    verbose : bool
        If True, show a progress bar over rows.
    """
    config: BoardConfig
    verbose: bool = False

    def build_row_table(self) -> RowTable:
        return enumerate_rows(self.config.column_count)

    def compute_final_table(self) -> GridTable:
        """
        Counts every board fill and returns the table after the last row.

        Returns
        -------
        GridTable
            `table[sig, k]` = number of full boards whose last row has
            signature `sig` and which use exactly `k <= F` fences.
        """
        start_time = time.perf_counter()
        config = self.config

        logger.info("=" * 60)
        logger.info(f"Fence count DP for a {config.describe()}")
        logger.info(
            f"Grid table: {config.signature_dimension} signatures x {config.fence_dimension} fence counts"
        )
        logger.info("=" * 60)

        # ---------- 1. Enumerate single rows once ----------
        # The row table is read-only for the rest of the run.
        row_table = self.build_row_table()
        logger.info(f"Row table built: {row_table.total():,} single-row arrangements")

        # Each row pairs every new signature with its compatible predecessors:
        # 3**C (signature, previous signature) pairs in total.
        compatible_pairs = sum(
            count_compatible_signatures(signature, config.column_count)
            for signature in range(config.signature_dimension)
        )
        logger.debug(f"Compatible signature pairs per row: {compatible_pairs:,}")

        # ---------- 2. Allocate the buffer pair and seed zero rows ----------
        # Zero rows filled: one way, empty signature, no fences.
        buffers = GridBufferPair.allocate(config)
        buffers.previous.seed()

        # ---------- 3. Add the rows one at a time ----------
        show_progress = self.verbose or logger.isEnabledFor(logging.INFO)
        row_iter = tqdm(range(config.row_count), desc="Fence DP", leave=True, disable=not show_progress)

        for row_index in row_iter:
            # Read `previous`, overwrite `current`, then make the new table the input.
            add_row(buffers.previous, row_table, row_index, current=buffers.current)
            buffers.swap()
            logger.debug(f"Row {row_index + 1}/{config.row_count} done")

        elapsed = time.perf_counter() - start_time
        logger.info(f"Fence count DP completed in {elapsed:.2f}s")

        # After the final swap the newest table sits in `previous`.
        return buffers.previous


def compute_final_table(config: BoardConfig, verbose: bool = False) -> GridTable:
    """Functional wrapper around `FenceGridEngine.compute_final_table`."""
    return FenceGridEngine(config=config, verbose=verbose).compute_final_table()
