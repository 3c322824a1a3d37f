"""
Errors module for wordsieve.

Every error raised by the core derives from WordsieveError, so the
interactive loop can report it and keep going. Each one also derives from
the builtin exception a caller would naturally catch.
"""


class WordsieveError(Exception):
    """Base class for all recoverable wordsieve errors."""


class IndexOutOfRange(WordsieveError, IndexError):
    """A position index is not within [0, word_length)."""


class ConflictingClassification(WordsieveError, ValueError):
    """A position was marked both correct and incorrect."""


class EmptyCandidateSet(WordsieveError, LookupError):
    """A recommendation was requested with no candidates left."""


class MalformedInput(WordsieveError, ValueError):
    """A command, guess or argument could not be parsed into valid input."""


class UnknownGuess(MalformedInput):
    """The guessed word is not one of the remaining candidates."""
