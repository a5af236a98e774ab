"""
Core kata logic - pure functions, no I/O.

Each module holds one algorithm that computes one value from one input.
"""

from .words import reverse_words
from .anagram import AnagramReport, char_frequencies, check_anagram, is_anagram
from .digits import largest_digit
from .multiples import propagate_multiples_of_ten

__all__ = [
    "reverse_words",
    "AnagramReport",
    "char_frequencies",
    "check_anagram",
    "is_anagram",
    "largest_digit",
    "propagate_multiples_of_ten",
]
