"""Ghost word game -- modular package."""

from ghostgame.constants import ALPHABET, MAX_LENGTH, MIN_LENGTH, MIN_PLAYERS
from ghostgame.trie import Trie, TrieNode
from ghostgame.dictionary import clean_words, load_dictionary
from ghostgame.game import GameState, GhostGame
from ghostgame.errors import (
    AllocationFailure,
    ConfigError,
    DictionaryUnreadable,
    FragmentOverflow,
    GameOverError,
    GhostError,
    InvalidPlayerCount,
    InvalidPrefix,
    TeardownError,
    UsageError,
)

__all__ = [
    "ALPHABET",
    "MAX_LENGTH",
    "MIN_LENGTH",
    "MIN_PLAYERS",
    "AllocationFailure",
    "ConfigError",
    "DictionaryUnreadable",
    "FragmentOverflow",
    "GameOverError",
    "GameState",
    "GhostError",
    "GhostGame",
    "InvalidPlayerCount",
    "InvalidPrefix",
    "TeardownError",
    "Trie",
    "TrieNode",
    "UsageError",
    "clean_words",
    "load_dictionary",
]
