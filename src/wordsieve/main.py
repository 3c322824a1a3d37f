"""
Main entry point for wordsieve.

Interactive assistant: enter a guess and which positions came back correct
or misplaced, and it narrows the dictionary and suggests the next guess.
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional, Tuple

from wordsieve.commands import HELP_TEXT, Action, Command, parse_command, parse_positions
from wordsieve.config import DEFAULT_CONFIG_PATH, Settings, load_settings
from wordsieve.dictionary import load_dictionary
from wordsieve.errors import WordsieveError
from wordsieve.session import Session

log = logging.getLogger(__name__)

Prompt = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordsieve",
        description="Narrow down a word-guessing puzzle from letter feedback.",
    )
    parser.add_argument(
        "-n", "--length", type=int, default=None,
        help="Word length (default: from settings, 5)")
    parser.add_argument(
        "-d", "--dictionary", default=None,
        help="Word list file, one word per line (default: from settings)")
    parser.add_argument(
        "-c", "--config", default=None,
        help=f"Settings JSON file (default: {DEFAULT_CONFIG_PATH} if present)")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log more detail (-v for info, -vv for debug)")
    return parser


def report(session: Session, settings: Settings) -> None:
    """Print the remaining count, a short candidate list and the suggestion."""
    if session.is_exhausted:
        return
    if session.remaining <= settings.max_listed:
        print(", ".join(session.candidates))
    recommendation = session.recommend()
    print(f"{session.remaining} candidates left. "
          f"Try '{recommendation.word}' (score {recommendation.score})")


def _ask_positions(prompt: Prompt) -> Tuple[FrozenSet[int], FrozenSet[int]]:
    correct = parse_positions(prompt("  Correct placement: "))
    incorrect = parse_positions(prompt("Incorrect placement: "))
    return correct, incorrect


def execute(session: Session, command: Command, settings: Settings,
            prompt: Optional[Prompt] = None) -> bool:
    """
    Run one command against the session.

    Args:
        session: Session to act on
        command: Parsed command
        settings: Display settings
        prompt: Function used to ask for guess positions

    Returns:
        True if the candidate set may have changed, False otherwise
    """
    prompt = prompt or input
    action = command.action

    if action is Action.GUESS:
        correct, incorrect = command.correct, command.incorrect
        if correct is None:
            correct, incorrect = _ask_positions(prompt)
        session.submit_guess(command.word, correct, incorrect)
        return True

    if action in (Action.PRUNE, Action.REQUIRE):
        if command.index is None:
            method = session.prune if action is Action.PRUNE else session.require
            method(command.letter)
        else:
            method = session.prune_at if action is Action.PRUNE else session.require_at
            method(command.letter, command.index)
        return True

    if action is Action.CONTAINS:
        found = session.contains(command.word)
        print(f"'{command.word}' is {'still' if found else 'not'} a candidate")
    elif action is Action.LIST:
        print(", ".join(session.candidates) or "(none)")
    elif action is Action.SUGGEST:
        for i, rec in enumerate(session.rank(settings.top_n), 1):
            print(f"  {i}. {rec.word}: {rec.score}")
    elif action is Action.HISTORY:
        print(f"Guesses: {list(session.history)}")
    elif action is Action.HELP:
        print(HELP_TEXT)
    return False


def run_loop(session: Session, settings: Settings,
             prompt: Optional[Prompt] = None) -> None:
    """
    Read and run commands until one candidate is left, none are left, or
    the user quits.
    """
    prompt = prompt or input
    while session.remaining > 1:
        print(f"Guesses: {list(session.history)}")

        try:
            line = prompt("Guess: ")
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if not line.strip():
            continue

        try:
            command = parse_command(line)
            if command.action is Action.QUIT:
                return
            if execute(session, command, settings, prompt):
                report(session, settings)
        except WordsieveError as e:
            print(f">> {e} <<")
        except (EOFError, KeyboardInterrupt):
            print()
            return

    if session.is_solved:
        print(f"Solution: {session.solution}")
    else:
        print("No candidates left: the feedback is inconsistent with the "
              "dictionary, or the answer is not in it.")


def main(argv: Optional[List[str]] = None) -> int:
    """Launch the interactive assistant."""
    args = build_parser().parse_args(argv)

    config_file = args.config
    if config_file is None and Path(DEFAULT_CONFIG_PATH).exists():
        config_file = DEFAULT_CONFIG_PATH

    try:
        settings = load_settings(config_file)
        overrides = {}
        if args.length is not None:
            overrides["word_length"] = args.length
        if args.dictionary is not None:
            overrides["dictionary_path"] = args.dictionary
        # replace() re-runs validation
        settings = replace(settings, **overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    level = (logging.DEBUG if args.verbose > 1
             else logging.INFO if args.verbose == 1
             else settings.log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    log.debug(f"Settings: {settings.to_dict()}")

    try:
        words = load_dictionary(settings.dictionary_path, settings.word_length)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    session = Session.from_words(words, settings.word_length,
                                 accept_any_guess=settings.accept_any_guess)
    print(f"Loaded {session.remaining} {settings.word_length}-letter words. "
          f"Type 'help' for commands.")
    report(session, settings)
    run_loop(session, settings)
    return 0


if __name__ == "__main__":
    sys.exit(main())
