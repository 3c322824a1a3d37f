"""
wordsieve: narrows a word-guessing puzzle's candidate words from letter feedback.
"""

from wordsieve.candidates import CandidateSet
from wordsieve.errors import (
    ConflictingClassification,
    EmptyCandidateSet,
    IndexOutOfRange,
    MalformedInput,
    UnknownGuess,
    WordsieveError,
)
from wordsieve.recommender import Recommendation, WordRecommender
from wordsieve.session import Session
from wordsieve.tiles import Tile, TileState, classify

__version__ = "0.1.0"

__all__ = [
    "CandidateSet",
    "ConflictingClassification",
    "EmptyCandidateSet",
    "IndexOutOfRange",
    "MalformedInput",
    "Recommendation",
    "Session",
    "Tile",
    "TileState",
    "UnknownGuess",
    "WordRecommender",
    "WordsieveError",
    "classify",
]
