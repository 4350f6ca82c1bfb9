from quoridor_fences.counting.row_enumerator import enumerate_rows
from quoridor_fences.counting.row_convolution import add_row
from quoridor_fences.counting.grid_driver import FenceGridEngine, compute_final_table
from quoridor_fences.counting.aggregator import FenceCountSummary, aggregate

__all__ = [
    "enumerate_rows",
    "add_row",
    "FenceGridEngine",
    "compute_final_table",
    "FenceCountSummary",
    "aggregate",
]
