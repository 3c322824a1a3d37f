"""
Constraints module for wordsieve.

Derives filtering predicates from classified tiles and applies them to a
collection of words.
Critical: Correctly handles guesses that repeat a letter.
"""

import logging
from typing import Callable, Iterable, List, Sequence, Set

from wordsieve.tiles import Tile, TileState

log = logging.getLogger(__name__)

Predicate = Callable[[str], bool]


def require_at(letter: str, index: int) -> Predicate:
    """Keep words with `letter` at position `index`."""
    def predicate(word: str) -> bool:
        return word[index] == letter
    predicate.__qualname__ = f"require_at({letter!r}, {index})"
    return predicate


def prune_at(letter: str, index: int) -> Predicate:
    """Keep words without `letter` at position `index`."""
    def predicate(word: str) -> bool:
        return word[index] != letter
    predicate.__qualname__ = f"prune_at({letter!r}, {index})"
    return predicate


def require(letter: str) -> Predicate:
    """Keep words containing `letter` anywhere."""
    def predicate(word: str) -> bool:
        return letter in word
    predicate.__qualname__ = f"require({letter!r})"
    return predicate


def prune(letter: str) -> Predicate:
    """Keep words not containing `letter` anywhere."""
    def predicate(word: str) -> bool:
        return letter not in word
    predicate.__qualname__ = f"prune({letter!r})"
    return predicate


def marked_letters(tiles: Iterable[Tile]) -> Set[str]:
    """
    Letters of a guess known to occur in the solution.

    Returns:
        Set of letters appearing in any CORRECT or INCORRECT tile
    """
    return {tile.letter for tile in tiles if tile.is_marked}


def derive_predicates(tiles: Sequence[Tile]) -> List[Predicate]:
    """
    Derive the predicates one guess imposes on the candidates.

    Per-tile rules:
    - CORRECT(ch) at i   -> require_at(ch, i)
    - INCORRECT(ch) at i -> prune_at(ch, i) and require(ch)
    - UNUSED(ch) at i    -> prune_at(ch, i), plus prune(ch) only if ch is
                            not a marked letter of the same guess

    Example: "speed" with S misplaced, the first E correct and the second
    E unused. E is marked, so only position 3 loses E; answers such as
    "chess" (one E) and "these" (two E's) both survive.

    Args:
        tiles: Complete tile sequence of a single guess

    Returns:
        Predicates in application order: global prunes first, then
        positional predicates
    """
    marked = marked_letters(tiles)

    # Step 1: Global prunes for letters absent from the solution
    predicates: List[Predicate] = []
    pruned: Set[str] = set()
    for tile in tiles:
        if tile.state is TileState.UNUSED and tile.letter not in marked:
            if tile.letter not in pruned:
                pruned.add(tile.letter)
                predicates.append(prune(tile.letter))

    # Step 2: Position-specific predicates
    for index, tile in enumerate(tiles):
        if tile.state is TileState.CORRECT:
            predicates.append(require_at(tile.letter, index))
        elif tile.state is TileState.INCORRECT:
            predicates.append(prune_at(tile.letter, index))
            predicates.append(require(tile.letter))
        else:
            predicates.append(prune_at(tile.letter, index))

    log.debug(f"Marked letters {sorted(marked)}, globally pruned {sorted(pruned)}")
    return predicates


def filter_words(words: Iterable[str], predicates: Sequence[Predicate]) -> Set[str]:
    """
    Filter words down to those satisfying every predicate.

    Args:
        words: Words to filter
        predicates: Filters to apply; order does not affect the result

    Returns:
        Set of words accepted by all predicates
    """
    return {word for word in words if all(p(word) for p in predicates)}


if __name__ == "__main__":
    from wordsieve.tiles import classify

    print("=== Repeated letter: SPEED, S misplaced, first E correct ===")
    words = {"chess", "tress", "these", "sheep", "steep", "speed"}
    tiles = classify("speed", correct={2}, incorrect={0})
    print(f"Marked letters: {sorted(marked_letters(tiles))}")
    print(f"Remaining: {sorted(filter_words(words, derive_predicates(tiles)))}")
    print("Expected: ['chess', 'these', 'tress'] (E is not banned outright)")
