from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import logging

from quoridor_fences.config.yaml_io import read_yaml

logger = logging.getLogger(__name__)

# Upper bound on the number of cells in any one table: each grid table
# (2**C * (F + 1), two alive during a run) and the row table (2**C * (C + 1)).
MAX_GRID_TABLE_CELLS = 1 << 24

# YAML key -> BoardConfig field
YAML_KEYS = {
    "columns": "column_count",
    "rows": "row_count",
    "max_fences": "max_fence_count",
}


def _require_int(name: str, value, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")


@dataclass(frozen=True, slots=True)
class BoardConfig:
    """
    Problem instance for the fence count enumeration.

    Attributes
    ----------
    column_count : int
        Number of fence columns in a row (C). Signatures are C-bit masks.
    row_count : int
        Number of fence rows on the board (R).
    max_fence_count : int
        Ceiling on the total number of fences placed (F).

    Raises
    ------
    ValueError
        If a field is not a positive integer, or if the grid tables implied by
        the configuration would exceed `MAX_GRID_TABLE_CELLS`. The check runs
        before anything is allocated.
    """
    column_count: int = 8
    row_count: int = 8
    max_fence_count: int = 20

    def __post_init__(self) -> None:
        _require_int("column_count", self.column_count, 1)
        _require_int("row_count", self.row_count, 1)
        _require_int("max_fence_count", self.max_fence_count, 0)

        # Compare exponents first so a huge column count never builds a huge int.
        if self.column_count > MAX_GRID_TABLE_CELLS.bit_length() - 1:
            raise ValueError(
                f"column_count={self.column_count} needs 2**{self.column_count} signatures; "
                f"grid tables are limited to {MAX_GRID_TABLE_CELLS:,} cells"
            )
        cells = self.signature_dimension * self.fence_dimension
        if cells > MAX_GRID_TABLE_CELLS:
            raise ValueError(
                f"Grid table of {self.signature_dimension} x {self.fence_dimension} = {cells:,} cells "
                f"exceeds the limit of {MAX_GRID_TABLE_CELLS:,}"
            )

        # The row table is 2**C x (C + 1); it outgrows the grid tables when F < C.
        row_cells = self.signature_dimension * (self.max_fences_per_row + 1)
        if row_cells > MAX_GRID_TABLE_CELLS:
            raise ValueError(
                f"Row table of {self.signature_dimension} x {self.max_fences_per_row + 1} = {row_cells:,} cells "
                f"exceeds the limit of {MAX_GRID_TABLE_CELLS:,}"
            )

    @property
    def signature_dimension(self) -> int:
        """Number of distinct vertical signatures, 2**C."""
        return 1 << self.column_count

    @property
    def max_vertical_signature(self) -> int:
        return self.signature_dimension - 1

    @property
    def fence_dimension(self) -> int:
        """Number of tracked fence counts, F + 1 (0..F inclusive)."""
        return self.max_fence_count + 1

    @property
    def max_fences_per_row(self) -> int:
        return self.column_count

    def describe(self) -> str:
        return f"{self.column_count}x{self.row_count} board, up to {self.max_fence_count} fences"


def load_board_config(yaml_path: str | Path) -> BoardConfig:
    """
    Loads a `BoardConfig` from a YAML file.

    The file holds a mapping with any of the keys `columns`, `rows` and
    `max_fences`; omitted keys keep the `BoardConfig` defaults.

    Parameters
    ----------
    yaml_path : str | Path
        Path to a `.yaml`/`.yml` file.

    Returns
    -------
    BoardConfig
        The validated configuration.

    Raises
    ------
    ValueError
        On unknown keys, a non-YAML file, or invalid values.
    """
    raw = read_yaml(yaml_path)
    unknown = sorted(set(raw) - set(YAML_KEYS))
    if unknown:
        raise ValueError(f"Unknown board config keys in {yaml_path}: {', '.join(map(str, unknown))}")

    kwargs = {YAML_KEYS[key]: value for key, value in raw.items()}
    config = BoardConfig(**kwargs)
    logger.debug(f"Loaded board config from {yaml_path}: {config}")
    return config
