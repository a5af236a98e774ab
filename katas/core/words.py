"""
Word reversal.

Reverses the characters of every word while keeping word order and
spacing intact.
"""

SEPARATOR = " "


def reverse_words(sentence: str) -> str:
    """
    Reverse each space-separated word in a sentence.

    Splitting on a single space keeps empty tokens, so runs of spaces and
    leading/trailing spaces survive unchanged.

    Args:
        sentence: Words separated by single spaces

    Returns:
        Sentence with every word's characters reversed
    """
    if not isinstance(sentence, str):
        raise TypeError(f"sentence must be a str, got {type(sentence).__name__}")

    return SEPARATOR.join(word[::-1] for word in sentence.split(SEPARATOR))
