"""
Stats module for wordsieve.

Provides the letter frequency table used to score candidates.
Implements caching strategy based on candidate set identity.
"""

from collections import Counter
from typing import Dict, FrozenSet, Iterable


def letter_frequencies(words: Iterable[str]) -> Dict[str, int]:
    """
    Count, for each letter, how many words contain it at least once.

    Repeated letters within a word are counted once for that word.

    Args:
        words: Words to analyze

    Returns:
        Dictionary mapping {letter: number of words containing it}

    Example:
        letter_frequencies(["speed", "crane"]) ->
        {'s': 1, 'p': 1, 'e': 2, 'd': 1, 'c': 1, 'r': 1, 'a': 1, 'n': 1}
    """
    counts: Counter = Counter()
    for word in words:
        counts.update(set(word))
    return dict(counts)


class LetterStats:
    """
    Computes and caches letter frequency tables for candidate sets.

    The table is always computed from scratch for a given set of words. Only
    the most recent table is cached, keyed on the frozen contents, so a
    shrunken set never reuses a stale table.
    """

    def __init__(self):
        self._cache: Dict[FrozenSet[str], Dict[str, int]] = {}

    def get_letter_frequencies(self, words: Iterable[str]) -> Dict[str, int]:
        """
        Get the letter frequency table for the given words.

        Args:
            words: Current candidates

        Returns:
            Dictionary mapping {letter: number of candidates containing it}
        """
        cache_key = frozenset(words)

        if cache_key in self._cache:
            return self._cache[cache_key]

        # Only the latest table is kept
        self._cache.clear()
        frequencies = letter_frequencies(cache_key)
        self._cache[cache_key] = frequencies

        return frequencies

    def clear_cache(self):
        """Clear the frequency cache."""
        self._cache.clear()

    def get_cache_size(self) -> int:
        """Get number of cached frequency tables."""
        return len(self._cache)
