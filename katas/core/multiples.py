"""
Multiple-of-ten propagation.

Walking left to right, the most recent multiple of ten replaces every
following element until the next multiple of ten takes over. Elements
before the first multiple of ten pass through unchanged.
"""

from typing import List, Sequence

import numpy as np

# Index marker for "no multiple of ten seen yet"; never a valid position.
UNSET = -1


def propagate_multiples_of_ten(sequence: Sequence[int]) -> List[int]:
    """
    Carry each multiple of ten forward until the next one.

    Implemented as a forward fill over positions: every slot looks up the
    index of the latest multiple of ten at or before it. Because the carry
    is tracked by index rather than value, 0 is carried like any other
    multiple of ten.

    Args:
        sequence: Integers (list, tuple or 1-D ndarray)

    Returns:
        List of the same length as ``sequence``

    Example:
        >>> propagate_multiples_of_ten([28, 7, 30, 84, 50, 37])
        [28, 7, 30, 30, 50, 50]
    """
    if sequence is None:
        raise TypeError("sequence must not be None")

    values = np.asarray(sequence)
    if values.size == 0:
        return []
    if values.ndim != 1 or not np.issubdtype(values.dtype, np.integer):
        raise TypeError("sequence must be a flat sequence of integers")

    positions = np.arange(values.size)
    is_multiple = values % 10 == 0
    carry_index = np.maximum.accumulate(np.where(is_multiple, positions, UNSET))

    result = np.where(carry_index == UNSET, values, values[carry_index])
    return result.tolist()
