"""
Unit tests for the unbounded-precision grid table and its double buffer.
"""
import pytest

from quoridor_fences.config import BoardConfig
from quoridor_fences.structures import GridTable, GridBufferPair


@pytest.fixture
def small_config():
    return BoardConfig(column_count=2, row_count=3, max_fence_count=4)


def test_new_table_is_zero(small_config):
    table = GridTable(small_config)
    assert table.shape == (4, 5)
    assert table.total() == 0
    assert all(value == 0 for row in table.to_lists() for value in row)


def test_seed_sets_single_base_case(small_config):
    table = GridTable(small_config)
    table.set(3, 4, 99)
    table.seed()
    assert table[0, 0] == 1
    assert table[3, 4] == 0
    assert table.total() == 1


def test_holds_values_beyond_64_bits(small_config):
    """Cells keep Python ints, so values past 2**64 are stored exactly."""
    table = GridTable(small_config)
    huge = 2 ** 200 + 12345
    table.set(1, 2, huge)
    table.set(2, 2, huge)
    assert table.get(1, 2) == huge
    assert table.column_totals()[2] == 2 * huge
    assert str(table.total()) == str(2 * huge)


def test_set_signature_row(small_config):
    table = GridTable(small_config)
    table.set_signature_row(1, [1, 2, 3, 4, 5])
    assert table.to_lists()[1] == [1, 2, 3, 4, 5]
    assert table.column_totals() == [1, 2, 3, 4, 5]

    with pytest.raises(ValueError):
        table.set_signature_row(1, [1, 2])


def test_clear_resets_everything(small_config):
    table = GridTable(small_config)
    table.set_signature_row(3, [7, 7, 7, 7, 7])
    table.clear()
    assert table.total() == 0


def test_buffer_pair_swaps_roles(small_config):
    buffers = GridBufferPair.allocate(small_config)
    first, second = buffers.previous, buffers.current
    assert first is not second

    buffers.swap()
    assert buffers.previous is second
    assert buffers.current is first

    buffers.swap()
    assert buffers.previous is first
