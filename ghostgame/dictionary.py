"""Word list loading: turns a dictionary file into a trie index."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from ghostgame.constants import DICTIONARY_SEARCH_PATHS, MAX_LENGTH
from ghostgame.errors import DictionaryUnreadable
from ghostgame.trie import Trie

log = logging.getLogger("ghostgame")


def clean_words(lines: Iterable[str], max_length: int = MAX_LENGTH) -> Iterator[str]:
    """Yield lowercase, purely alphabetic words from raw lines, in order.

    Blank lines are ignored.  Tokens with other characters or longer than
    ``max_length`` are skipped.
    """
    skipped = 0
    for line in lines:
        word = line.strip()
        if not word:
            continue
        if not (word.isascii() and word.isalpha()) or len(word) > max_length:
            skipped += 1
            log.debug("Skipping %r", word)
            continue
        yield word.lower()
    if skipped:
        log.info("Skipped %s unusable entries", f"{skipped:,}")


def find_dictionary(dict_path: str | None = None) -> str:
    """Path of the word list to load.

    An explicit ``dict_path`` is used as is; otherwise the first existing
    file from the default search list wins.
    """
    if dict_path:
        return dict_path
    for path in DICTIONARY_SEARCH_PATHS:
        if os.path.isfile(path):
            return path
    raise DictionaryUnreadable(
        "no dictionary found (looked for " + ", ".join(DICTIONARY_SEARCH_PATHS) + ")"
    )


def load_dictionary(dict_path: str | None = None, max_length: int = MAX_LENGTH) -> Trie:
    """Build the index from a word list file."""
    path = find_dictionary(dict_path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            trie = Trie.from_words(clean_words(f, max_length))
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryUnreadable(f"could not load {path}: {exc}") from exc
    log.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie
