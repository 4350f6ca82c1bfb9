from typing import Iterator


def iter_compatible_signatures(new_signature: int, max_signature: int) -> Iterator[int]:
    """
    Iterates over every previous-row signature compatible with `new_signature`.

    A vertical fence covers two rows, so a column that starts a vertical fence
    in the new row must not also start one in the row before it. The
    compatible previous signatures are therefore exactly the subsets of the
    bits *not* set in `new_signature`; every other bit is free.

    They are enumerated with the standard "supersets of a mask" step:
    `(prev | mask) + 1` forces the mask bits to 1 and adds one, which carries
    through the forced bits straight into the next free bit, so the result is
    the next superset of `mask` in increasing order. `& ~mask` then strips the
    forced bits again, leaving the next free-bit pattern. Starting from 0 this
    visits each pattern exactly once in ascending order. After the last
    pattern (all free bits set) the sum overflows to `max_signature + 1`,
    which ends the iteration.

    Parameters
    ----------
    new_signature : int
        The signature of the row being added (the fixed mask).
    max_signature : int
        The largest representable signature, `2**C - 1`.

    Yields
    ------
    int
        Each compatible previous signature, in ascending order.
    """
    mask = new_signature
    prev = 0
    while prev <= max_signature:
        yield prev
        prev = ((prev | mask) + 1) & ~mask


def count_compatible_signatures(new_signature: int, column_count: int) -> int:
    """Number of signatures `iter_compatible_signatures` yields: 2**(free bits)."""
    return 1 << (column_count - bin(new_signature).count("1"))


def format_signature(signature: int, column_count: int) -> str:
    """
    Renders a signature column-by-column, column 0 first.

    `|` marks a vertical fence and `.` anything else, e.g. signature 17 over
    8 columns renders as `|...|...`.
    """
    return "".join("|" if signature >> column & 1 else "." for column in range(column_count))
