"""
Recommender module for wordsieve.

Scores the remaining candidates by aggregate letter frequency and suggests
the next guess. This is a greedy heuristic: words built from common letters
tend to produce more correct/misplaced feedback on the next guess.
"""

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from wordsieve.errors import EmptyCandidateSet
from wordsieve.stats import LetterStats

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Recommendation:
    """A suggested next guess and its frequency score."""
    word: str
    score: int


class WordRecommender:
    """
    Recommends next guesses from the current candidates.

    Strategy:
    - Build the letter frequency table of the candidates
    - Score each candidate as the sum of its letters' frequencies,
      counting repeated letters every time they occur
    - Highest score wins; ties go to the alphabetically first word
    """

    def __init__(self, stats: Optional[LetterStats] = None):
        self.stats = stats if stats is not None else LetterStats()

    @staticmethod
    def score_word(word: str, frequencies: Dict[str, int]) -> int:
        """Sum of letter frequencies over every letter of the word."""
        return sum(frequencies.get(letter, 0) for letter in word)

    def rank(self, candidates: Iterable[str], top_n: int = 5) -> List[Recommendation]:
        """
        Rank candidates by score.

        Args:
            candidates: Current candidate words
            top_n: Number of recommendations to return (default 5)

        Returns:
            Up to top_n recommendations, score descending then word ascending

        Raises:
            ValueError: If top_n < 1
            EmptyCandidateSet: If there are no candidates
        """
        if top_n < 1:
            raise ValueError(f"top_n must be >= 1, got {top_n}")

        words = frozenset(candidates)
        if not words:
            raise EmptyCandidateSet(
                "No candidates left to recommend. "
                "The feedback may be wrong, or the answer is not in the dictionary."
            )

        frequencies = self.stats.get_letter_frequencies(words)
        scored = [(word, self.score_word(word, frequencies)) for word in words]

        # Explicit (score desc, word asc) key keeps ties deterministic
        top = heapq.nsmallest(top_n, scored, key=lambda x: (-x[1], x[0]))

        return [Recommendation(word, score) for word, score in top]

    def recommend(self, candidates: Iterable[str]) -> Recommendation:
        """
        Suggest the single best next guess.

        Args:
            candidates: Current candidate words

        Returns:
            The highest scoring candidate

        Raises:
            EmptyCandidateSet: If there are no candidates
        """
        best = self.rank(candidates, top_n=1)[0]
        log.debug(f"Recommending {best.word!r} (score {best.score})")
        return best
