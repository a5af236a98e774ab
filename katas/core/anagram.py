"""
Anagram checking via character-frequency maps.

Every character counts, whitespace included, and case matters: "Listen"
and "silent" are not anagrams.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict


def char_frequencies(text: str) -> Dict[str, int]:
    """
    Count how often each character occurs in ``text``.

    Keys appear in first-occurrence order.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    return dict(Counter(text))


@dataclass
class AnagramReport:
    """
    Outcome of comparing two strings.

    Holds both frequency mappings alongside the verdict so callers can
    print or inspect them.
    """
    first: str
    second: str
    first_counts: Dict[str, int]
    second_counts: Dict[str, int]
    is_anagram: bool

    def __post_init__(self):
        """Validate frequency mappings."""
        for label, counts in (("first_counts", self.first_counts), ("second_counts", self.second_counts)):
            if not isinstance(counts, dict):
                raise TypeError(f"{label} must be a dict")
            if any(not isinstance(c, int) or c < 0 for c in counts.values()):
                raise ValueError(f"{label} must hold non-negative counts")


def check_anagram(a: str, b: str) -> AnagramReport:
    """
    Compare two strings and keep both frequency mappings.

    Args:
        a: First string
        b: Second string

    Returns:
        AnagramReport with counts for each string and the verdict
    """
    first_counts = char_frequencies(a)
    second_counts = char_frequencies(b)

    return AnagramReport(
        first=a,
        second=b,
        first_counts=first_counts,
        second_counts=second_counts,
        # dict equality ignores key order
        is_anagram=first_counts == second_counts,
    )


def is_anagram(a: str, b: str) -> bool:
    """True iff ``a`` and ``b`` have identical character counts."""
    return check_anagram(a, b).is_anagram
