"""
Dictionary module for wordsieve.

Loads and cleans a word list file, keeping words of one length.
"""

import logging
from pathlib import Path
from typing import List, Set

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY_PATH = "/usr/share/dict/words"


def is_valid_word(word: str, word_length: int) -> bool:
    """
    Check if a cleaned word is ASCII alphabetic and exactly word_length long.

    Args:
        word: The word to check
        word_length: Required length

    Returns:
        True if the word qualifies, False otherwise
    """
    return len(word) == word_length and word.isascii() and word.isalpha()


def load_dictionary(filepath: str | Path, word_length: int = 5) -> List[str]:
    """
    Load and clean a word list.

    Cleaning steps:
    1. Strip whitespace
    2. Convert to lowercase
    3. Filter: exactly word_length letters, ASCII alphabetic only
    4. Remove duplicates
    5. Sort alphabetically

    Args:
        filepath: Path to the word list file (one word per line)
        word_length: Length of words to keep (default 5)

    Returns:
        List of cleaned, deduplicated, sorted words

    Raises:
        FileNotFoundError: If the word list file doesn't exist
        ValueError: If word_length < 1 or no valid words are found
    """
    if word_length < 1:
        raise ValueError(f"word_length must be >= 1, got {word_length}")

    filepath = Path(filepath)

    if not filepath.is_file():
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    words: Set[str] = set()
    total = 0

    with open(filepath, 'r', encoding='utf-8', errors='replace') as f:
        for line in f:
            total += 1
            word = line.strip().lower()
            if is_valid_word(word, word_length):
                words.add(word)

    if not words:
        raise ValueError(f"No valid {word_length}-letter words found in {filepath}")

    log.info(f"Read {total:,} lines from {filepath}, kept {len(words):,} "
             f"{word_length}-letter words")
    return sorted(words)
