"""
Dictionary pruning by start key, end key and estimated length.
"""
from typing import Iterable, List


def length_tolerance(word_length: int) -> int:
    """Allowed gap between a word's length and the estimated length."""
    return max(5, word_length // 2)


def filter_candidates(
    words: Iterable[str],
    start_char: str,
    end_char: str,
    estimated_length: int,
) -> List[str]:
    """
    Keep the words worth scoring for a gesture.

    A word qualifies when it has at least two letters, starts with
    `start_char`, ends with `end_char` and its length is within
    `length_tolerance` of `estimated_length`. The tolerance widens for long
    words because the point-count estimate undershoots them.
    """
    start_char = start_char.lower()
    end_char = end_char.lower()

    candidates = []
    for word in words:
        if len(word) < 2:
            continue
        if word[0].lower() != start_char or word[-1].lower() != end_char:
            continue
        if abs(len(word) - estimated_length) <= length_tolerance(len(word)):
            candidates.append(word)
    return candidates
