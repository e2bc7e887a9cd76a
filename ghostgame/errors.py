"""Exception hierarchy for Ghost."""

from __future__ import annotations


class GhostError(Exception):
    """Base class for every error raised by this package."""


class ConfigError(GhostError):
    """Bad command line or game configuration."""


class UsageError(ConfigError):
    """Wrong number of command line arguments."""


class InvalidPlayerCount(ConfigError):
    """Player count is not an integer >= 2."""


class FragmentOverflow(ConfigError):
    """The fragment grew past the configured maximum length.

    Unreachable when the dictionary was loaded with the same length limit,
    so hitting it means the index and the game disagree about the bound.
    """


class DictionaryUnreadable(GhostError):
    """The word list is missing, unopenable or cannot be decoded."""


class AllocationFailure(GhostError):
    """Ran out of memory while building the index."""


class TeardownError(GhostError):
    """The index was already torn down."""


class InvalidPrefix(GhostError):
    """No dictionary word begins with ``fragment + letter``.

    Recoverable: the game state is untouched and the same player retries.
    """

    def __init__(self, fragment: str, letter: str):
        super().__init__(f'There\'s no word that begins with "{fragment}{letter}".')
        self.fragment = fragment
        self.letter = letter


class GameOverError(GhostError):
    """A letter was played after the game had ended."""
