"""
KataRunner - turn each kata into a console program.

Each program takes its configured input, calls the pure function and
returns the exact lines to print.
"""

from typing import Callable, Dict, List, Mapping, Optional, Sequence
import logging

from .config import KataConfig
from .core import (
    check_anagram,
    largest_digit,
    propagate_multiples_of_ten,
    reverse_words,
)

logger = logging.getLogger(__name__)

PROGRAM_NAMES = ("reverse", "anagram", "digit", "propagate")


def format_bool(value: bool) -> str:
    """Render a boolean as ``true``/``false``."""
    return "true" if value else "false"


def format_counts(counts: Mapping[str, int]) -> str:
    """Render a frequency mapping as ``{c=n, ...}``."""
    return "{" + ", ".join(f"{char}={count}" for char, count in counts.items()) + "}"


def format_sequence(values: Sequence[int]) -> str:
    """Render integers each followed by a single space."""
    return "".join(f"{value} " for value in values)


class KataRunner:
    """Run kata programs against a KataConfig."""

    def __init__(self, config: Optional[KataConfig] = None):
        self.config = config or KataConfig()
        self._programs: Dict[str, Callable[[], List[str]]] = {
            "reverse": self.run_reverse,
            "anagram": self.run_anagram,
            "digit": self.run_digit,
            "propagate": self.run_propagate,
        }

    def run_reverse(self) -> List[str]:
        sentence = self.config.reverse.sentence
        logger.debug(f"Reversing words of {sentence!r}")
        return [reverse_words(sentence)]

    def run_anagram(self) -> List[str]:
        report = check_anagram(self.config.anagram.first, self.config.anagram.second)
        logger.debug(f"Compared {report.first!r} with {report.second!r}")
        return [
            format_counts(report.first_counts),
            format_counts(report.second_counts),
            format_bool(report.is_anagram),
        ]

    def run_digit(self) -> List[str]:
        number = self.config.digit.number
        logger.debug(f"Finding largest digit of {number}")
        return [str(largest_digit(number))]

    def run_propagate(self) -> List[str]:
        numbers = self.config.propagate.numbers
        logger.debug(f"Propagating multiples of ten over {len(numbers)} values")
        return [format_sequence(propagate_multiples_of_ten(numbers))]

    def run(self, program: str) -> List[str]:
        """
        Run a single program by name.

        Args:
            program: One of PROGRAM_NAMES

        Returns:
            Output lines, without trailing newlines
        """
        if program not in self._programs:
            raise KeyError(f"Unknown program: {program}")
        return self._programs[program]()

    def run_all(self) -> List[str]:
        """Run every program in order and concatenate their output."""
        lines = []
        for program in PROGRAM_NAMES:
            lines.extend(self.run(program))
        return lines
