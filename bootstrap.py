#!/usr/bin/env python3
"""
Setup script for Ghost.
Builds the words.txt word list the game loads by default.
"""

import os
import sys
import urllib.request

from ghostgame.constants import DEFAULT_DICTIONARY, MAX_LENGTH
from ghostgame.dictionary import clean_words

SYSTEM_DICT = '/usr/share/dict/words'

URLS = [
    "https://raw.githubusercontent.com/benhoyt/goawk/master/testdata/words",
]


def write_word_list(lines, dict_path):
    """Write the cleaned, deduplicated, sorted words from ``lines``.

    Returns the number of words written.
    """
    words = set(clean_words(lines, MAX_LENGTH))
    with open(dict_path, 'w', encoding='utf-8') as f:
        for word in sorted(words):
            f.write(word + '\n')
    return len(words)


def download_dictionary(dict_path=None):
    """Create the word list from the system dictionary or a public source.

    Returns True if ``dict_path`` exists afterwards.
    """
    dict_path = dict_path or os.path.join(os.path.dirname(os.path.abspath(__file__)), DEFAULT_DICTIONARY)

    if os.path.exists(dict_path):
        with open(dict_path, encoding='utf-8') as f:
            count = sum(1 for _ in f)
        print(f"Dictionary already exists: {dict_path} ({count:,} words)")
        return True

    if os.path.exists(SYSTEM_DICT):
        print(f"  Using system dictionary: {SYSTEM_DICT}")
        with open(SYSTEM_DICT, encoding='utf-8') as f:
            count = write_word_list(f, dict_path)
        print(f"Dictionary created: {count:,} words -> {dict_path}")
        return True

    for url in URLS:
        try:
            print(f"  Trying {url}...")
            with urllib.request.urlopen(url) as resp:
                lines = resp.read().decode('utf-8').splitlines()
        except (OSError, UnicodeDecodeError) as e:
            print(f"  Failed: {e}")
            continue
        count = write_word_list(lines, dict_path)
        print(f"Dictionary downloaded: {count:,} words")
        return True

    print("\nCould not build a dictionary automatically.")
    print("  Save a word list (one word per line) as:")
    print(f"  {dict_path}")
    return False


def main():
    print("=" * 50)
    print("  Ghost -- Setup")
    print("=" * 50)
    print()

    ok = download_dictionary(sys.argv[1] if len(sys.argv) > 1 else None)

    print()
    print("=" * 50)
    if ok:
        print("  Setup complete! Play with:")
        print()
        print("    ghost 2           # two players")
        print("    python -m ghostgame 3")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())
