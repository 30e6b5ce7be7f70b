"""Power-set generation over a fixed-size integer sequence.

Subsets are enumerated by counting an inclusion mask from ``0`` to
``2**n - 1``. Bit ``i`` of the mask selects ``elements[i]``, so the result
follows binary counting order and each subset keeps the input's relative
order:

    >>> generate([1, 2, 3])
    [[], [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]

Only sequences of exactly ``POWERSET_CONFIG.expected_size`` elements are
accepted. Any other length is not an error for the caller: a diagnostic is
written to stderr and an empty list is returned.
"""

from __future__ import annotations

import sys
from typing import List, Sequence

from powerset.config import POWERSET_CONFIG
from powerset.logging import get_logger

logger = get_logger(__name__)


def invalid_size_message(expected_size: int) -> str:
    """Return the diagnostic printed when the input length is not ``expected_size``."""
    return f"Input must be a set of exactly {expected_size} elements."


INVALID_SIZE_MESSAGE = invalid_size_message(POWERSET_CONFIG.expected_size)


def subset_for_mask(elements: Sequence[int], mask: int) -> List[int]:
    """Return the elements selected by ``mask``, in input order.

    Args:
        elements: Input sequence.
        mask: Inclusion mask; bit ``i`` set means ``elements[i]`` is included.

    Returns:
        New list holding the selected elements.
    """
    return [elements[i] for i in range(len(elements)) if mask & (1 << i)]


def generate(elements: Sequence[int]) -> List[List[int]]:
    """Return every subset of ``elements`` in increasing mask order.

    Args:
        elements: Sequence of exactly three integers. Not modified.

    Returns:
        List of 8 subsets, starting with the empty subset and ending with the
        full sequence. Empty when the input length is wrong.
    """
    n = len(elements)
    if n != POWERSET_CONFIG.expected_size:
        logger.debug(
            f"Rejecting input of length {n} "
            f"(expected {POWERSET_CONFIG.expected_size})"
        )
        print(invalid_size_message(POWERSET_CONFIG.expected_size), file=sys.stderr)
        return []

    subsets = [
        subset_for_mask(elements, mask) for mask in range(POWERSET_CONFIG.max_mask)
    ]
    logger.debug(f"Generated {len(subsets)} subsets of {list(elements)}")
    return subsets
