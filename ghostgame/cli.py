"""Terminal front end for Ghost."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from ghostgame.constants import (
    EXIT_ABANDONED,
    EXIT_BAD_CONFIG,
    EXIT_DICTIONARY_LOAD,
    EXIT_DICTIONARY_UNLOAD,
    EXIT_OK,
    EXIT_USAGE,
    MAX_LENGTH,
    MIN_LENGTH,
    MIN_PLAYERS,
)
from ghostgame.dictionary import load_dictionary
from ghostgame.errors import (
    AllocationFailure,
    ConfigError,
    DictionaryUnreadable,
    FragmentOverflow,
    InvalidPlayerCount,
    InvalidPrefix,
    TeardownError,
    UsageError,
)
from ghostgame.game import GhostGame
from ghostgame.trie import Trie

log = logging.getLogger("ghostgame")

BANNER = r"""
 _______           _______  _______ _________
(  ____ \|\     /|(  ___  )(  ____ \\__   __/
| (    \/| )   ( || (   ) || (    \/   ) (
| |      | (___) || |   | || (_____    | |
| | ____ |  ___  || |   | |(_____  )   | |
| | \_  )| (   ) || |   | |      ) |   | |
| (___) || )   ( || (___) |/\____) |   | |
(_______)|/     \|(_______)\_______)   )_(
"""


class _ArgumentParser(argparse.ArgumentParser):
    """argparse, but usage problems raise instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ghost",
        description="Ghost -- take turns adding letters; whoever completes a word loses",
    )
    parser.add_argument("players", metavar="N",
                        help=f"Number of players (integer >= {MIN_PLAYERS})")
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--min-length", default=str(MIN_LENGTH),
                        help=f"Words must be longer than this to end the game (default {MIN_LENGTH})")
    parser.add_argument("--max-length", default=str(MAX_LENGTH),
                        help=f"Longest word loaded from the dictionary (default {MAX_LENGTH})")
    parser.add_argument("--no-clear", action="store_true",
                        help="Don't clear the screen or print the banner")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def parse_count(
    value: str,
    name: str,
    minimum: int,
    error: type[ConfigError] = ConfigError,
) -> int:
    try:
        n = int(value)
    except ValueError:
        n = None
    if n is None or n < minimum:
        raise error(
            f"Invalid argument. {name} must be an integer >= {minimum}."
        )
    return n


def clear() -> None:
    """Clear the terminal with ANSI escape sequences."""
    print("\033[2J\033[0;0H", end="")


def greet() -> None:
    clear()
    print(BANNER)


def read_letter(player: int, read: Callable[[str], str] | None = None) -> str:
    """Prompt ``player`` until they type a letter.

    Only the first non-blank character of each line counts.
    """
    read = read or input
    while True:
        line = read(f"Player {player} says letter: ").strip()
        if line and line[0].isascii() and line[0].isalpha():
            return line[0].lower()


def run_game(
    game: GhostGame,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> int:
    """Play ``game`` to the end.  Returns the losing player."""
    write = write or print
    while not game.is_over:
        write(f"\nCurrent word fragment: {game.fragment}")
        letter = read_letter(game.current_player, read)
        try:
            game.play(letter)
        except InvalidPrefix as exc:
            write(str(exc))
            write("Try again.")

    write(f"\nPlayer {game.loser} loses!")
    write(f'They spelled the word "{game.word}".')
    write("Thanks for playing!\n")
    return game.loser


def _play(index: Trie, players: int, min_length: int, max_length: int) -> int:
    try:
        run_game(GhostGame(index, players, min_length, max_length))
    except (EOFError, KeyboardInterrupt):
        print()
        log.warning("Input closed -- game abandoned.")
        return EXIT_ABANDONED
    except FragmentOverflow as exc:
        log.error("%s", exc)
        return EXIT_BAD_CONFIG
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        players = parse_count(args.players, "N", MIN_PLAYERS, InvalidPlayerCount)
        min_length = parse_count(args.min_length, "--min-length", 0)
        max_length = parse_count(args.max_length, "--max-length", 1)
    except UsageError as exc:
        log.error("%s", exc)
        parser.print_usage()
        return EXIT_USAGE
    except ConfigError as exc:
        log.error("%s", exc)
        return EXIT_BAD_CONFIG

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.no_clear:
        greet()

    try:
        index = load_dictionary(args.dict, max_length)
    except (DictionaryUnreadable, AllocationFailure) as exc:
        log.error("%s", exc)
        return EXIT_DICTIONARY_LOAD

    try:
        with index:
            code = _play(index, players, min_length, max_length)
    except TeardownError as exc:
        log.error("Could not unload dictionary: %s", exc)
        return EXIT_DICTIONARY_UNLOAD
    return code
