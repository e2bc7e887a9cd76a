"""Game constants for Ghost."""

from __future__ import annotations

import os
import string

ALPHABET = string.ascii_lowercase
ALPHABET_SIZE = len(ALPHABET)  # 26

# A fragment must be longer than MIN_LENGTH before a completed word ends the game
MIN_LENGTH = 3
MAX_LENGTH = 45

MIN_PLAYERS = 2

DEFAULT_DICTIONARY = "words.txt"

DICTIONARY_SEARCH_PATHS: list[str] = [
    DEFAULT_DICTIONARY,
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", DEFAULT_DICTIONARY),
    "/usr/share/dict/words",
]

# Process exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_BAD_CONFIG = 2
EXIT_DICTIONARY_LOAD = 3
EXIT_DICTIONARY_UNLOAD = 4
EXIT_ABANDONED = 5
