"""
Unit tests for the board configuration.

This module checks the defaults, derived dimensions and fail-fast validation
of `BoardConfig`, and the YAML loader built on top of it.
"""
import pytest

from quoridor_fences.config import BoardConfig, MAX_GRID_TABLE_CELLS, load_board_config


# ---------------------------------------------------------------------------
# BoardConfig
# ---------------------------------------------------------------------------
def test_defaults_are_standard_quoridor_board():
    """The default instance is the 8x8 board with 20 fences."""
    config = BoardConfig()
    assert (config.column_count, config.row_count, config.max_fence_count) == (8, 8, 20)


def test_derived_dimensions():
    """Signature and fence dimensions follow from C and F."""
    config = BoardConfig(column_count=3, row_count=2, max_fence_count=5)
    assert config.signature_dimension == 8
    assert config.max_vertical_signature == 7
    assert config.fence_dimension == 6
    assert config.max_fences_per_row == 3


def test_zero_fence_ceiling_is_allowed():
    """F = 0 is a valid (if small) instance: only the empty board counts."""
    assert BoardConfig(column_count=2, row_count=2, max_fence_count=0).fence_dimension == 1


@pytest.mark.parametrize(
    "kwargs",
    [
        {"column_count": 0},
        {"row_count": 0},
        {"max_fence_count": -1},
        {"column_count": 2.5},
        {"row_count": "8"},
        {"column_count": True},
    ],
)
def test_invalid_fields_raise(kwargs):
    """Non-integers, bools and out-of-range values are rejected."""
    with pytest.raises(ValueError):
        BoardConfig(**kwargs)


def test_oversized_tables_rejected_before_allocation():
    """
    A configuration whose grid table would exceed the cell limit fails in the
    constructor, including column counts far too large to ever allocate.
    """
    with pytest.raises(ValueError, match="column_count"):
        BoardConfig(column_count=64)

    # 2**16 signatures x 257 fence counts is just over 2**24 cells.
    with pytest.raises(ValueError, match="Grid table"):
        BoardConfig(column_count=16, max_fence_count=256)

    # Exactly at the limit is fine.
    config = BoardConfig(column_count=16, max_fence_count=255)
    assert config.signature_dimension * config.fence_dimension == MAX_GRID_TABLE_CELLS


@pytest.mark.parametrize("column_count", [20, 24])
def test_oversized_row_table_rejected_with_small_ceiling(column_count):
    """
    With F < C the row table (2**C x (C + 1)) is the largest allocation, so
    it is bounded too even though the grid tables would fit.
    """
    with pytest.raises(ValueError, match="Row table"):
        BoardConfig(column_count=column_count, row_count=1, max_fence_count=0)


def test_widest_row_table_within_limit_accepted():
    """2**19 signatures x 20 fence counts stays under 2**24 cells."""
    config = BoardConfig(column_count=19, row_count=1, max_fence_count=0)
    assert config.signature_dimension * (config.max_fences_per_row + 1) <= MAX_GRID_TABLE_CELLS


def test_config_is_frozen():
    """The instance cannot be changed mid-run."""
    config = BoardConfig()
    with pytest.raises(AttributeError):
        config.column_count = 4


# ---------------------------------------------------------------------------
# load_board_config
# ---------------------------------------------------------------------------
def test_load_full_yaml(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("columns: 4\nrows: 3\nmax_fences: 7\n", encoding="utf-8")

    assert load_board_config(path) == BoardConfig(column_count=4, row_count=3, max_fence_count=7)


def test_load_partial_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "board.yml"
    path.write_text("max_fences: 10\n", encoding="utf-8")

    assert load_board_config(path) == BoardConfig(max_fence_count=10)


def test_load_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_board_config(path) == BoardConfig()


def test_load_rejects_unknown_keys(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("columns: 4\nwalls: 3\n", encoding="utf-8")

    with pytest.raises(ValueError, match="walls"):
        load_board_config(path)


def test_load_rejects_non_yaml_suffix(tmp_path):
    path = tmp_path / "board.json"
    path.write_text("{}", encoding="utf-8")

    with pytest.raises(ValueError, match="YAML"):
        load_board_config(path)


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")

    with pytest.raises(ValueError, match="mapping"):
        load_board_config(path)


def test_load_propagates_value_validation(tmp_path):
    path = tmp_path / "board.yaml"
    path.write_text("columns: 0\n", encoding="utf-8")

    with pytest.raises(ValueError):
        load_board_config(path)
