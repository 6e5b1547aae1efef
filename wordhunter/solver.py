from __future__ import annotations

import logging
from typing import Iterable, Sequence

from wordhunter.errors import InvalidArgumentError, UninitializedStateError
from wordhunter.grid import Grid, Location, TraversalContext, set_board
from wordhunter.lexicon import Lexicon, load_lexicon
from wordhunter.scoring import check_min_length, score_words

logger = logging.getLogger("wordhunter")

DEFAULT_BOARD = [
    "E", "E", "C", "A",
    "A", "L", "E", "P",
    "H", "N", "B", "O",
    "Q", "T", "T", "Y",
]


def find_all_words(grid: Grid, lexicon: Lexicon, min_length: int) -> list[str]:
    """Find every lexicon word of at least ``min_length`` characters on the grid.

    Runs an independent depth-first search from each cell in row-major order,
    abandoning a branch as soon as the accumulated string is not a prefix of any
    lexicon word. Returns the words sorted alphabetically, without duplicates.
    """
    check_min_length(min_length)
    found: set[str] = set()
    ctx = grid.new_context()

    def dfs(cell: Location):
        if ctx.is_visited(cell) or not lexicon.has_prefix(ctx.extended(cell)):
            return
        with ctx.visit(cell) as word:
            if len(word) >= min_length and word in lexicon:
                found.add(word)
            for nbr in grid.neighbors(cell):
                dfs(nbr)

    for start in grid.cells():
        ctx.reset()
        dfs(start)

    logger.debug("Found %d words of length >= %d", len(found), min_length)
    return sorted(found)


def find_path(grid: Grid, target: str) -> list[int]:
    """Return the cell indices of the first simple path spelling ``target``, or []."""
    if not isinstance(target, str):
        raise InvalidArgumentError(f"target word must be a string, got {target!r}")
    target = target.upper()
    if not target:
        return []

    ctx = grid.new_context()
    for start in grid.cells():
        token = grid[start]
        if token == target:
            return [grid.index(start)]
        if target.startswith(token):
            ctx.reset()
            path = _trace(ctx, start, target)
            if path:
                return path
    return []


def _trace(ctx: TraversalContext, cell: Location, target: str) -> list[int] | None:
    if ctx.is_visited(cell) or not target.startswith(ctx.extended(cell)):
        return None
    with ctx.visit(cell) as word:
        # Path length must match too, or multi-character tokens would spell it short
        if word == target and len(ctx.path) == len(target):
            return list(ctx.path)
        for nbr in ctx.grid.neighbors(cell):
            path = _trace(ctx, nbr, target)
            if path:
                return path
    return None


class WordHunter:
    """Word search game engine: holds the current board and lexicon.

    Starts with a default 4x4 board and no lexicon; every search or score
    raises UninitializedStateError until a lexicon has been loaded.
    """

    def __init__(self, lexicon: Lexicon | None = None):
        self.lexicon = lexicon
        self.board = set_board(DEFAULT_BOARD)

    def load_lexicon(self, path) -> Lexicon:
        self.lexicon = load_lexicon(path)
        return self.lexicon

    def use_lexicon(self, words: Iterable[str]) -> Lexicon:
        if words is None:
            raise InvalidArgumentError("words must not be None")
        self.lexicon = Lexicon.from_words(words)
        logger.info("Loaded %d words", len(self.lexicon))
        return self.lexicon

    def set_board(self, tokens: Sequence[str]) -> Grid:
        self.board = set_board(tokens)
        return self.board

    def _require_lexicon(self) -> Lexicon:
        if self.lexicon is None:
            raise UninitializedStateError("no lexicon loaded")
        return self.lexicon

    def find_all_words(self, min_length: int) -> list[str]:
        lexicon = self._require_lexicon()
        words = find_all_words(self.board, lexicon, min_length)
        logger.info("Found %d words on %dx%d board", len(words), self.board.width, self.board.height)
        return words

    def find_path(self, word: str) -> list[int]:
        self._require_lexicon()
        return find_path(self.board, word)

    def is_valid_word(self, word: str) -> bool:
        lexicon = self._require_lexicon()
        if word is None:
            raise InvalidArgumentError("word must not be None")
        return word.upper() in lexicon

    def is_valid_prefix(self, prefix: str) -> bool:
        lexicon = self._require_lexicon()
        if prefix is None:
            raise InvalidArgumentError("prefix must not be None")
        return lexicon.has_prefix(prefix.upper())

    def score(self, words: Iterable[str], min_length: int) -> int:
        self._require_lexicon()
        return score_words(words, min_length)
