"""
Config module for wordsieve.

Loads settings from a JSON file on top of built-in defaults.
"""

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from wordsieve.dictionary import DEFAULT_DICTIONARY_PATH

log = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/settings.json"

# Default settings (used if settings.json not found)
DEFAULT_SETTINGS: Dict[str, Any] = {
    "word_length": 5,
    "dictionary_path": DEFAULT_DICTIONARY_PATH,
    "max_listed": 20,       # Print the remaining words when at most this many
    "top_n": 5,             # Suggestions shown by the `suggest` command
    "accept_any_guess": False,
    "log_level": "WARNING",
}


@dataclass
class Settings:
    word_length: int = DEFAULT_SETTINGS["word_length"]
    dictionary_path: str = DEFAULT_SETTINGS["dictionary_path"]
    max_listed: int = DEFAULT_SETTINGS["max_listed"]
    top_n: int = DEFAULT_SETTINGS["top_n"]
    accept_any_guess: bool = DEFAULT_SETTINGS["accept_any_guess"]
    log_level: str = DEFAULT_SETTINGS["log_level"]

    def __post_init__(self):
        """Validate input"""
        if self.word_length < 1:
            raise ValueError(f"word_length must be >= 1, got {self.word_length}")
        if self.max_listed < 0:
            raise ValueError(f"max_listed must be >= 0, got {self.max_listed}")
        if self.top_n < 1:
            raise ValueError(f"top_n must be >= 1, got {self.top_n}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: '{self.log_level}'")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _has_expected_type(key: str, value: Any) -> bool:
    expected = type(DEFAULT_SETTINGS[key])
    # bool is a subclass of int; don't accept true/false as a number
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def load_settings(config_file: Optional[str | Path] = None) -> Settings:
    """
    Load settings from a JSON file or use defaults.

    Known keys with a value of the wrong type keep their default; unknown
    keys are ignored. A missing or unreadable file gives all defaults.

    Args:
        config_file: Path to settings JSON file (defaults if not provided)

    Returns:
        Settings instance

    Raises:
        ValueError: If a correctly typed value is out of range
    """
    if config_file is None:
        return Settings()

    config_path = Path(config_file)
    if not config_path.exists():
        log.warning(f"Settings file not found: {config_path}. Using default settings")
        return Settings()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Failed to load settings from {config_path}: {e}. "
                    f"Using default settings")
        return Settings()

    if not isinstance(loaded, dict):
        log.warning(f"Settings file {config_path} must hold a JSON object. "
                    f"Using default settings")
        return Settings()

    settings = DEFAULT_SETTINGS.copy()
    for key in DEFAULT_SETTINGS:
        if key in loaded:
            value = loaded[key]
            if not _has_expected_type(key, value):
                log.warning(f"Invalid type for setting '{key}': {type(value).__name__}. "
                            f"Using default.")
                continue
            settings[key] = value

    for key in sorted(loaded.keys() - DEFAULT_SETTINGS.keys()):
        log.warning(f"Ignoring unknown setting '{key}'")

    return Settings(**settings)
