"""
Candidates module for wordsieve.

Holds the working set of words still consistent with every constraint
applied so far. The set only ever shrinks.
"""

import logging
from typing import FrozenSet, Iterable, Iterator, Optional, Sequence

from wordsieve import constraints
from wordsieve.constraints import Predicate
from wordsieve.errors import IndexOutOfRange, MalformedInput
from wordsieve.tiles import Tile

log = logging.getLogger(__name__)


def _is_word(text: str) -> bool:
    return text.isascii() and text.isalpha()


class CandidateSet:
    """
    Mutable set of admissible words, all of one length.

    Every mutation computes the filtered set in full before replacing the
    current one, so a failed call leaves the set untouched.
    """

    def __init__(self, words: Iterable[str], word_length: Optional[int] = None):
        """
        Build a candidate set from a word list.

        Args:
            words: Initial words; duplicates and mixed case are allowed
            word_length: Expected word length. If None, taken from the words.

        Raises:
            MalformedInput: If a word is not alphabetic, lengths differ, or
                            the length cannot be determined
        """
        normalized = {word.strip().lower() for word in words}

        for word in normalized:
            if not _is_word(word):
                raise MalformedInput(f"Candidate must be alphabetic: '{word}'")

        lengths = {len(word) for word in normalized}
        if word_length is None:
            if not lengths:
                raise MalformedInput("Cannot infer word length from an empty word list")
            if len(lengths) > 1:
                raise MalformedInput(
                    f"Candidates must share one length, got lengths {sorted(lengths)}"
                )
            word_length = lengths.pop()
        elif lengths - {word_length}:
            raise MalformedInput(
                f"Candidates must be {word_length} letters, "
                f"got lengths {sorted(lengths)}"
            )

        if word_length < 1:
            raise MalformedInput(f"Word length must be >= 1, got {word_length}")

        self.word_length = word_length
        self._words = normalized

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._words))

    def __repr__(self) -> str:
        return f"CandidateSet({len(self)} words, word_length={self.word_length})"

    def contains(self, word: str) -> bool:
        """Membership test (case-insensitive)."""
        return word in self

    @property
    def words(self) -> FrozenSet[str]:
        """Snapshot of the current candidates."""
        return frozenset(self._words)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def retain(self, predicates: Sequence[Predicate], label: str = "retain") -> int:
        """
        Keep only words accepted by every predicate.

        Args:
            predicates: Filters to apply
            label: Description used in the debug log

        Returns:
            Number of words removed
        """
        before = len(self._words)
        self._words = constraints.filter_words(self._words, predicates)
        removed = before - len(self._words)
        log.debug(f"{label}: {before} -> {len(self._words)} candidates")
        return removed

    def apply_tiles(self, tiles: Sequence[Tile]) -> int:
        """
        Apply the constraints of one classified guess.

        Args:
            tiles: Tile sequence of the guess, one per position

        Returns:
            Number of words removed

        Raises:
            MalformedInput: If the tile count does not match the word length,
                            or a tile letter is not a single letter
        """
        if len(tiles) != self.word_length:
            raise MalformedInput(
                f"Expected {self.word_length} tiles, got {len(tiles)}"
            )
        tiles = [Tile(self._check_letter(tile.letter), tile.state) for tile in tiles]
        guess = "".join(tile.letter for tile in tiles)
        return self.retain(constraints.derive_predicates(tiles), label=f"guess {guess!r}")

    def require_at(self, letter: str, index: int) -> int:
        letter = self._check_letter(letter)
        self._check_index(index)
        return self.retain([constraints.require_at(letter, index)],
                           label=f"require_at({letter!r}, {index})")

    def prune_at(self, letter: str, index: int) -> int:
        letter = self._check_letter(letter)
        self._check_index(index)
        return self.retain([constraints.prune_at(letter, index)],
                           label=f"prune_at({letter!r}, {index})")

    def require(self, letter: str) -> int:
        letter = self._check_letter(letter)
        return self.retain([constraints.require(letter)], label=f"require({letter!r})")

    def prune(self, letter: str) -> int:
        letter = self._check_letter(letter)
        return self.retain([constraints.prune(letter)], label=f"prune({letter!r})")

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @staticmethod
    def _check_letter(letter: str) -> str:
        if not isinstance(letter, str) or len(letter) != 1 or not _is_word(letter):
            raise MalformedInput(f"Expected a single letter, got {letter!r}")
        return letter.lower()

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise MalformedInput(f"Position must be an integer, got {index!r}")
        if not 0 <= index < self.word_length:
            raise IndexOutOfRange(
                f"Position {index} is out of range for a "
                f"{self.word_length}-letter word (expected 0-{self.word_length - 1})"
            )
