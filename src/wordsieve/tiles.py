"""
Tiles module for wordsieve.

Turns a guess plus the positions reported as correct and as misplaced into
one Tile per letter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from wordsieve.errors import ConflictingClassification, IndexOutOfRange, MalformedInput


class TileState(Enum):
    """Feedback for one letter position"""
    CORRECT = "correct"
    INCORRECT = "incorrect"
    UNUSED = "unused"


@dataclass(frozen=True)
class Tile:
    """
    One classified position of a guess.

    Attributes:
        letter: The guessed letter at this position
        state: CORRECT if the letter belongs here,
               INCORRECT if it is in the solution but not here,
               UNUSED if it is not part of the solution
    """
    letter: str
    state: TileState

    @property
    def is_marked(self) -> bool:
        """True if the letter is known to occur in the solution."""
        return self.state in (TileState.CORRECT, TileState.INCORRECT)


def _check_indices(indices: Iterable[int], word_length: int) -> None:
    for index in indices:
        if isinstance(index, bool) or not isinstance(index, int):
            raise MalformedInput(f"Position must be an integer, got {index!r}")
    for index in sorted(indices):
        if not 0 <= index < word_length:
            raise IndexOutOfRange(
                f"Position {index} is out of range for a "
                f"{word_length}-letter word (expected 0-{word_length - 1})"
            )


def classify(
    guess: str,
    correct: Iterable[int],
    incorrect: Iterable[int]
) -> Tuple[Tile, ...]:
    """
    Classify every position of a guess.

    Positions start unchecked. Correct positions are applied first, then
    incorrect positions, and whatever is still unchecked becomes UNUSED.

    Args:
        guess: The guessed word
        correct: Positions whose letter is in the right place
        incorrect: Positions whose letter is in the word but misplaced

    Returns:
        One Tile per letter of the guess, in order

    Raises:
        MalformedInput: If a position is not an integer
        IndexOutOfRange: If a position is outside the guess
        ConflictingClassification: If a position is both correct and incorrect
    """
    correct = set(correct)
    incorrect = set(incorrect)
    word_length = len(guess)

    _check_indices(correct | incorrect, word_length)

    both = correct & incorrect
    if both:
        raise ConflictingClassification(
            f"Positions {sorted(both)} cannot be both correct and incorrect"
        )

    # None marks a position that has not been checked yet
    states: List[Optional[TileState]] = [None] * word_length
    for index in correct:
        states[index] = TileState.CORRECT
    for index in incorrect:
        if states[index] is None:
            states[index] = TileState.INCORRECT

    return tuple(
        Tile(letter, state if state is not None else TileState.UNUSED)
        for letter, state in zip(guess, states)
    )
