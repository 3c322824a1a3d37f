"""
Commands module for wordsieve.

Parses the interactive command language into Command objects. Parsing only
checks shape; range checks happen in the core.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional

from wordsieve.errors import MalformedInput


class Action(Enum):
    GUESS = "guess"
    PRUNE = "prune"
    REQUIRE = "require"
    CONTAINS = "contains"
    LIST = "list"
    SUGGEST = "suggest"
    HISTORY = "history"
    HELP = "help"
    QUIT = "quit"


@dataclass(frozen=True)
class Command:
    """
    One parsed command.

    For GUESS, `correct` and `incorrect` are None when the positions were
    not given inline and still have to be asked for.
    """
    action: Action
    word: Optional[str] = None
    letter: Optional[str] = None
    index: Optional[int] = None
    correct: Optional[FrozenSet[int]] = None
    incorrect: Optional[FrozenSet[int]] = None


HELP_TEXT = """\
Commands:
  <word>                           guess a word, then enter the positions
  guess <word> [correct [incorrect]]
                                   guess with positions inline, e.g. 'guess crane 03 -'
  prune <letter> [index]           drop words with the letter (at index)
  require <letter> [index]         keep words with the letter (at index)
  contains <word>                  check whether a word is still a candidate
  list                             show the remaining candidates
  suggest                          show the best next guesses
  history                          show the guesses so far
  help                             show this message
  quit                             leave
Positions are zero-based: '03', '0,3' or '0 3'; '-' or nothing for none."""

_NO_ARG_ACTIONS = {
    "list": Action.LIST,
    "suggest": Action.SUGGEST,
    "history": Action.HISTORY,
    "help": Action.HELP,
    "?": Action.HELP,
    "quit": Action.QUIT,
    "exit": Action.QUIT,
}

_SEPARATORS_RE = re.compile(r"[\s,]+")


def parse_positions(text: str) -> FrozenSet[int]:
    """
    Parse a list of zero-based positions.

    Accepted forms:
    - "" or "-": no positions
    - "03": every digit is one position
    - "0,3" or "10 11": integers separated by commas or whitespace
      ("10," for the single position 10)

    Args:
        text: Raw position text

    Returns:
        Set of positions

    Raises:
        MalformedInput: If any part is not a non-negative integer
    """
    text = text.strip()
    if text in ("", "-"):
        return frozenset()

    parts = [part for part in _SEPARATORS_RE.split(text) if part]
    if not _SEPARATORS_RE.search(text):
        parts = list(text)

    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise MalformedInput(f"Invalid position list: '{text}'")
    return frozenset(int(part) for part in parts)


def _parse_word(text: str) -> str:
    if not (text.isascii() and text.isalpha()):
        raise MalformedInput(f"Expected a word, got '{text}'")
    return text.lower()


def _parse_letter(text: str) -> str:
    if len(text) != 1 or not (text.isascii() and text.isalpha()):
        raise MalformedInput(f"Expected a single letter, got '{text}'")
    return text.lower()


def _parse_index(text: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise MalformedInput(f"Expected a position, got '{text}'")
    return int(text)


def _check_arity(keyword: str, args: List[str], low: int, high: int) -> None:
    if not low <= len(args) <= high:
        expected = str(low) if low == high else f"{low}-{high}"
        raise MalformedInput(
            f"'{keyword}' takes {expected} argument(s), got {len(args)}"
        )


def parse_command(line: str) -> Command:
    """
    Parse one line of input.

    Args:
        line: Raw input line

    Returns:
        The parsed Command

    Raises:
        MalformedInput: If the line is empty or cannot be parsed
    """
    tokens = line.split()
    if not tokens:
        raise MalformedInput("Empty command")

    keyword, args = tokens[0].lower(), tokens[1:]

    if keyword in _NO_ARG_ACTIONS:
        _check_arity(keyword, args, 0, 0)
        return Command(_NO_ARG_ACTIONS[keyword])

    if keyword == "guess":
        _check_arity(keyword, args, 1, 3)
        correct = parse_positions(args[1]) if len(args) > 1 else None
        incorrect = parse_positions(args[2]) if len(args) > 2 else None
        # An inline correct list with no incorrect list means none are misplaced
        if correct is not None and incorrect is None:
            incorrect = frozenset()
        return Command(Action.GUESS, word=_parse_word(args[0]),
                       correct=correct, incorrect=incorrect)

    if keyword in ("prune", "require"):
        _check_arity(keyword, args, 1, 2)
        index = _parse_index(args[1]) if len(args) > 1 else None
        return Command(Action(keyword), letter=_parse_letter(args[0]), index=index)

    if keyword == "contains":
        _check_arity(keyword, args, 1, 1)
        return Command(Action.CONTAINS, word=_parse_word(args[0]))

    # A bare word is a guess whose positions are asked for separately
    if len(tokens) == 1 and keyword.isascii() and keyword.isalpha():
        return Command(Action.GUESS, word=keyword)

    raise MalformedInput(f"Unknown command: '{line.strip()}'. Type 'help' for commands")
