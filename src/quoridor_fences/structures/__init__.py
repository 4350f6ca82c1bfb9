from quoridor_fences.structures.row_table import RowTable
from quoridor_fences.structures.grid_table import GridTable, GridBufferPair

__all__ = [
    "RowTable",
    "GridTable",
    "GridBufferPair",
]
