from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from typing import NamedTuple, Sequence

import numpy as np

from wordhunter.errors import InvalidArgumentError, InvalidShapeError

logger = logging.getLogger("wordhunter")


class Location(NamedTuple):
    row: int
    col: int


class Grid:
    """Square board of tokens. Cells are numbered row-major: row * width + col."""

    def __init__(self, rows: list[list[str]]):
        self.rows = rows
        self.width = len(rows)
        self.height = len(rows)

        # Precompute adjacency lists, in (row offset, col offset) order
        self._neighbors: list[list[Location]] = []
        for idx in range(self.width * self.height):
            r, c = self.cell(idx)
            adj = []
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue
                    p = Location(r + dr, c + dc)
                    if self.is_valid(p):
                        adj.append(p)
            self._neighbors.append(adj)

    def __len__(self) -> int:
        return self.width * self.height

    def __getitem__(self, cell: Location) -> str:
        return self.rows[cell[0]][cell[1]]

    def __str__(self) -> str:
        return " / ".join(" ".join(row) for row in self.rows)

    def is_valid(self, cell: Location) -> bool:
        return 0 <= cell[0] < self.height and 0 <= cell[1] < self.width

    def index(self, cell: Location) -> int:
        return cell[0] * self.width + cell[1]

    def cell(self, index: int) -> Location:
        return Location(*divmod(index, self.width))

    def cells(self):
        """All cells in row-major order."""
        for r in range(self.height):
            for c in range(self.width):
                yield Location(r, c)

    def neighbors(self, cell: Location) -> list[Location]:
        return self._neighbors[self.index(cell)]

    def new_context(self) -> TraversalContext:
        return TraversalContext(self)


def set_board(tokens: Sequence[str]) -> Grid:
    """Build a Grid from N*N tokens given in row-major order."""
    if tokens is None:
        raise InvalidArgumentError("board tokens must not be None")
    tokens = list(tokens)
    n = math.isqrt(len(tokens))
    if n == 0 or n * n != len(tokens):
        raise InvalidShapeError(f"{len(tokens)} tokens do not form a square board")
    for t in tokens:
        if not isinstance(t, str) or not t.strip():
            raise InvalidArgumentError(f"invalid board token: {t!r}")

    cleaned = [t.strip().upper() for t in tokens]
    grid = Grid([cleaned[r * n:(r + 1) * n] for r in range(n)])
    logger.info("Board %dx%d: %s", n, n, grid)
    return grid


class TraversalContext:
    """Scratch state for one top-level search: visited matrix, word and path.

    Owned by a single call; never shared between traversals.
    """

    def __init__(self, grid: Grid):
        self.grid = grid
        self.visited = np.zeros((grid.height, grid.width), dtype=bool)
        self.path: list[int] = []
        self._word = ""

    @property
    def word(self) -> str:
        return self._word

    def reset(self):
        self.visited.fill(False)
        self.path.clear()
        self._word = ""

    def is_visited(self, cell: Location) -> bool:
        return bool(self.visited[cell[0], cell[1]])

    def extended(self, cell: Location) -> str:
        """The accumulated word with ``cell``'s token appended, without mutating state."""
        return self._word + self.grid[cell]

    @contextmanager
    def visit(self, cell: Location):
        """Mark ``cell`` and append its token; always backtrack on exit."""
        token = self.grid[cell]
        self.visited[cell[0], cell[1]] = True
        self.path.append(self.grid.index(cell))
        self._word += token
        try:
            yield self._word
        finally:
            self.visited[cell[0], cell[1]] = False
            self.path.pop()
            self._word = self._word[:-len(token)]
