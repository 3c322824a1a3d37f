"""
Session module for wordsieve.

A Session owns one candidate set and the history of guesses made against
it. Independent sessions never share state.
"""

import logging
from typing import Iterable, List, Optional, Tuple

from wordsieve.candidates import CandidateSet
from wordsieve.errors import MalformedInput, UnknownGuess
from wordsieve.recommender import Recommendation, WordRecommender
from wordsieve.tiles import Tile, classify

log = logging.getLogger(__name__)


class Session:
    """
    One solving session.

    Attributes:
        candidates: Words still consistent with all feedback so far
        history: Guesses applied so far, in order (display only)
        accept_any_guess: If False, a guess must be a remaining candidate
    """

    def __init__(
        self,
        candidates: CandidateSet,
        recommender: Optional[WordRecommender] = None,
        accept_any_guess: bool = False
    ):
        self.candidates = candidates
        self.recommender = recommender if recommender is not None else WordRecommender()
        self.accept_any_guess = accept_any_guess
        self._history: List[str] = []

    @classmethod
    def from_words(cls, words: Iterable[str], word_length: Optional[int] = None,
                   **kwargs) -> 'Session':
        return cls(CandidateSet(words, word_length), **kwargs)

    @property
    def word_length(self) -> int:
        return self.candidates.word_length

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    @property
    def remaining(self) -> int:
        return len(self.candidates)

    @property
    def is_solved(self) -> bool:
        return self.remaining == 1

    @property
    def is_exhausted(self) -> bool:
        return self.remaining == 0

    @property
    def solution(self) -> Optional[str]:
        """The single remaining candidate, or None."""
        if self.is_solved:
            return next(iter(self.candidates))
        return None

    def submit_guess(
        self,
        guess: str,
        correct: Iterable[int] = (),
        incorrect: Iterable[int] = ()
    ) -> Tuple[Tile, ...]:
        """
        Apply the feedback for one guess.

        Args:
            guess: The guessed word
            correct: Positions whose letter is in the right place
            incorrect: Positions whose letter is in the word but misplaced

        Returns:
            The tiles derived from the feedback

        Raises:
            MalformedInput: If the guess has the wrong length or non-letters
            UnknownGuess: If the guess is not a candidate and
                          accept_any_guess is False
            IndexOutOfRange, ConflictingClassification: From classification
        """
        guess = guess.strip().lower()

        if len(guess) != self.word_length:
            raise MalformedInput(
                f"Guess must be {self.word_length} letters, got {len(guess)}: '{guess}'"
            )
        if not (guess.isascii() and guess.isalpha()):
            raise MalformedInput(f"Guess must be alphabetic: '{guess}'")
        if not self.accept_any_guess and guess not in self.candidates:
            raise UnknownGuess(f"'{guess}' is not one of the remaining candidates")

        tiles = classify(guess, correct, incorrect)
        removed = self.candidates.apply_tiles(tiles)
        self._history.append(guess)

        log.info(f"Guess {guess!r} removed {removed} candidates, {self.remaining} left")
        return tiles

    def prune(self, letter: str) -> int:
        return self.candidates.prune(letter)

    def prune_at(self, letter: str, index: int) -> int:
        return self.candidates.prune_at(letter, index)

    def require(self, letter: str) -> int:
        return self.candidates.require(letter)

    def require_at(self, letter: str, index: int) -> int:
        return self.candidates.require_at(letter, index)

    def contains(self, word: str) -> bool:
        return self.candidates.contains(word)

    def recommend(self) -> Recommendation:
        """
        Suggest the next guess.

        Raises:
            EmptyCandidateSet: If no candidates remain
        """
        return self.recommender.recommend(self.candidates)

    def rank(self, top_n: int = 5) -> List[Recommendation]:
        return self.recommender.rank(self.candidates, top_n=top_n)
