"""Prefix trie used as the Ghost dictionary index."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ghostgame.constants import ALPHABET_SIZE
from ghostgame.errors import AllocationFailure, TeardownError

log = logging.getLogger("ghostgame.trie")

_ORD_A = ord("a")


def _slot(letter: str) -> int:
    """Child slot for a lowercase letter, or ValueError."""
    i = ord(letter) - _ORD_A if len(letter) == 1 else -1
    if not 0 <= i < ALPHABET_SIZE:
        raise ValueError(f"not a lowercase letter: {letter!r}")
    return i


class TrieNode:
    """Single node in the prefix trie: 26 child slots and a word flag."""

    __slots__ = ("children", "is_word")

    def __init__(self):
        self.children: list[TrieNode | None] = [None] * ALPHABET_SIZE
        self.is_word: bool = False

    def child(self, letter: str) -> TrieNode | None:
        return self.children[_slot(letter)]

    def __repr__(self) -> str:
        letters = "".join(
            chr(_ORD_A + i) for i, c in enumerate(self.children) if c is not None
        )
        return f"TrieNode(is_word={self.is_word}, children={letters!r})"


class Trie:
    """Prefix trie for per-letter prefix and word checks.

    The trie owns its nodes.  Use it as a context manager so that
    :meth:`teardown` runs exactly once::

        with Trie.from_words(words) as index:
            node = index.advance(index.root, "c")
    """

    def __init__(self):
        self._root: TrieNode | None = TrieNode()
        self._words = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Trie:
        """Build a trie from an iterable of words.

        A :class:`MemoryError` while building is reported as
        :class:`AllocationFailure`; the partial trie is discarded.
        """
        trie = cls()
        try:
            for word in words:
                trie.insert(word)
        except MemoryError as exc:
            trie._root = None
            raise AllocationFailure("out of memory while building the index") from exc
        log.debug("Built index: %d words, %d nodes", len(trie), trie.node_count())
        return trie

    # lifecycle

    @property
    def root(self) -> TrieNode:
        if self._root is None:
            raise TeardownError("index has been torn down")
        return self._root

    @property
    def closed(self) -> bool:
        return self._root is None

    def teardown(self) -> int:
        """Release every node, root included.  Returns the number released.

        Nodes are never modified: dropping the root releases the tree, and
        cursors callers still hold keep the subtree they point at.
        """
        released = self.node_count()
        self._root = None
        self._words = 0
        log.debug("Released %d nodes", released)
        return released

    def __enter__(self) -> Trie:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self.closed:
            self.teardown()

    # building

    def insert(self, word: str) -> None:
        word = word.rstrip("\r\n")
        if not word.isascii():
            raise ValueError(f"not an ASCII word: {word!r}")
        word = word.lower()
        if not word:
            raise ValueError("cannot insert an empty word")
        slots = [_slot(ch) for ch in word]
        node = self.root
        for i in slots:
            child = node.children[i]
            if child is None:
                child = node.children[i] = TrieNode()
            node = child
        if not node.is_word:
            node.is_word = True
            self._words += 1

    # queries

    def advance(self, cursor: TrieNode, letter: str) -> TrieNode | None:
        """Child of ``cursor`` for ``letter``, or None if no word has that prefix."""
        if self.closed:
            raise TeardownError("index has been torn down")
        return cursor.child(letter)

    def is_complete_word(self, cursor: TrieNode) -> bool:
        if self.closed:
            raise TeardownError("index has been torn down")
        return cursor.is_word

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_word

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def node_count(self) -> int:
        count = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(c for c in node.children if c is not None)
        return count

    def __len__(self) -> int:
        if self.closed:
            raise TeardownError("index has been torn down")
        return self._words

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        if not s.isascii():
            return None
        for ch in s.lower():
            if not "a" <= ch <= "z":
                return None
            node = node.children[ord(ch) - _ORD_A]
            if node is None:
                return None
        return node
