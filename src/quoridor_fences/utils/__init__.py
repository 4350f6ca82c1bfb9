from quoridor_fences.utils.bit_utils import (
    iter_compatible_signatures,
    count_compatible_signatures,
    format_signature,
)

__all__ = [
    "iter_compatible_signatures",
    "count_compatible_signatures",
    "format_signature",
]
