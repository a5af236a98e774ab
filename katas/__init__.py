"""
practice-katas - four small coding-exercise algorithms.

Word reversal, anagram checking, largest-digit search and
multiple-of-ten propagation, each runnable from the ``katas`` CLI.
"""

__version__ = "0.1.0"
