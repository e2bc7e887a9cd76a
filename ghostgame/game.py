"""Ghost turn-taking state machine."""

from __future__ import annotations

import logging

from ghostgame.constants import MAX_LENGTH, MIN_LENGTH, MIN_PLAYERS
from ghostgame.errors import (
    FragmentOverflow,
    GameOverError,
    InvalidPlayerCount,
    InvalidPrefix,
)
from ghostgame.trie import Trie, TrieNode

log = logging.getLogger("ghostgame.game")


class GameState:
    """Whose turn it is, the fragment so far and where it sits in the trie."""

    __slots__ = ("player", "fragment", "cursor")

    def __init__(self, player: int, fragment: str, cursor: TrieNode):
        self.player = player      # 1-indexed
        self.fragment = fragment
        self.cursor = cursor      # non-owning; the index owns the node

    def __repr__(self) -> str:
        return f"GameState(player={self.player}, fragment={self.fragment!r})"


class GhostGame:
    """One game of Ghost played against a dictionary index.

    Players take turns adding a letter.  A letter that leads nowhere in the
    index raises :class:`InvalidPrefix` and leaves the state untouched.  The
    player who completes a word longer than ``min_length`` letters loses.
    """

    def __init__(
        self,
        index: Trie,
        players: int,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
    ):
        if players < MIN_PLAYERS:
            raise InvalidPlayerCount(f"need at least {MIN_PLAYERS} players, got {players}")
        self.index = index
        self.players = players
        self.min_length = min_length
        self.max_length = max_length
        self.state = GameState(1, "", index.root)
        self.history: list[tuple[int, str]] = []
        self.loser: int | None = None

    @property
    def current_player(self) -> int:
        return self.state.player

    @property
    def fragment(self) -> str:
        return self.state.fragment

    @property
    def is_over(self) -> bool:
        return self.loser is not None

    @property
    def word(self) -> str | None:
        """The word that ended the game, once it is over."""
        return self.state.fragment if self.is_over else None

    def play(self, letter: str) -> bool:
        """Add ``letter`` for the current player.  Returns True if the game ended."""
        if self.is_over:
            raise GameOverError("the game is already over")
        if len(letter) != 1 or not (letter.isascii() and letter.isalpha()):
            raise ValueError(f"expected a single letter, got {letter!r}")
        letter = letter.lower()

        state = self.state
        child = self.index.advance(state.cursor, letter)
        if child is None:
            raise InvalidPrefix(state.fragment, letter)

        fragment = state.fragment + letter
        if len(fragment) > self.max_length:
            raise FragmentOverflow(
                f"fragment {fragment!r} is longer than {self.max_length} letters"
            )

        player = state.player
        self.history.append((player, letter))
        if self.index.is_complete_word(child) and len(fragment) > self.min_length:
            self.state = GameState(player, fragment, child)
            self.loser = player
            log.debug("Player %d completed %r", player, fragment)
            return True

        self.state = GameState(player % self.players + 1, fragment, child)
        return False
