"""
Word frequency prior.

The decoder only needs a callable `frequency(word) -> float > 0`. The
heuristic below is the fallback used for plain word lists that carry no
counts; a real corpus can be plugged in through `FrequencyFileProvider`.
"""
from typing import Callable

FrequencyLookup = Callable[[str], float]

VERY_COMMON_FREQUENCY = 1000.0
COMMON_FREQUENCY = 500.0

VERY_COMMON_WORDS = frozenset([
    "the", "be", "to", "of", "and", "a", "in", "that", "have", "i",
    "it", "for", "not", "on", "with", "he", "as", "you", "do", "at",
])

COMMON_WORDS = frozenset([
    "this", "but", "his", "by", "from", "they", "we", "say", "her", "she",
    "or", "an", "will", "my", "one", "all", "would", "there", "their",
])


def heuristic_frequency(word: str) -> float:
    """Bucket very common words high, then decay with word length."""
    word = word.lower()
    if word in VERY_COMMON_WORDS:
        return VERY_COMMON_FREQUENCY
    if word in COMMON_WORDS:
        return COMMON_FREQUENCY

    # Longer words are generally less common
    length_penalty = len(word) / 10.0
    return max(1.0, 100.0 - length_penalty * 10.0)
