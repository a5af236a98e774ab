"""
Largest decimal digit of a non-negative integer.
"""

from typing import Optional


def largest_digit(n: int) -> int:
    """
    Find the largest decimal digit of ``n``.

    Digits are peeled off with ``n % 10`` and ``n // 10`` until nothing is
    left. Zero has the single digit 0.

    Args:
        n: Non-negative integer

    Returns:
        Largest digit, 0-9
    """
    # bool is an int subclass, but True is not a number here
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n == 0:
        return 0

    largest: Optional[int] = None
    while n > 0:
        digit = n % 10
        if largest is None or digit > largest:
            largest = digit
        n //= 10

    return largest
