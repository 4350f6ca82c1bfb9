"""
Unit tests for the single-row count table.
"""

from quoridor_fences.structures import RowTable


def test_shape_is_signatures_by_row_fence_counts():
    """One row of C columns has 2**C signatures and 0..C fences."""
    table = RowTable(3)
    assert table.shape == (8, 4)
    assert table.column_count == 3
    assert table.total() == 0


def test_increment_and_get():
    table = RowTable(2)
    table.increment(3, 2)
    table.increment(3, 2)
    assert table.get(3, 2) == 2
    assert table[3, 2] == 2
    assert table[0, 0] == 0
    assert isinstance(table.get(3, 2), int)


def test_nonzero_terms_ascending_python_ints():
    """Only non-zero cells are listed, per signature, in fence count order."""
    table = RowTable(2)
    table.increment(0, 1)
    table.increment(0, 0)
    table.increment(0, 1)
    table.increment(2, 2)

    terms = table.nonzero_terms()
    assert len(terms) == 4
    assert terms[0] == [(0, 1), (1, 2)]
    assert terms[1] == []
    assert terms[2] == [(2, 1)]
    assert all(type(ways) is int for sig_terms in terms for _, ways in sig_terms)
