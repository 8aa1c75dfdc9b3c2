# grid.py
"""Board primitives: positions, directions and the cell grid."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List

import numpy as np  # type: ignore


# ---------- Directions (row offset, col offset) ----------
class Direction(Enum):
    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def row_offset(self) -> int:
        return self.value[0]

    @property
    def col_offset(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


# ---------- Positions ----------
@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def translate(self, direction: Direction) -> "Position":
        return Position(self.row + direction.row_offset, self.col + direction.col_offset)


# ---------- Cell states ----------
class GridValue(IntEnum):
    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    OUTSIDE = 3  # returned by lookups off the board, never stored


# ---------- Grid ----------
class Grid:
    """
    Rows x Cols board kept in a single flat int8 buffer.
    Cell (row, col) lives at index row * cols + col.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self.cells = np.full(rows * cols, int(GridValue.EMPTY), dtype=np.int8)

    def _index(self, pos: Position) -> int:
        return pos.row * self.cols + pos.col

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get(self, pos: Position) -> GridValue:
        if not self.in_bounds(pos):
            return GridValue.OUTSIDE
        return GridValue(int(self.cells[self._index(pos)]))

    def set(self, pos: Position, value: GridValue) -> None:
        if value == GridValue.OUTSIDE:
            raise ValueError("OUTSIDE is a lookup sentinel and cannot be stored")
        if not self.in_bounds(pos):
            raise IndexError(f"{pos} is off the {self.rows}x{self.cols} grid")
        self.cells[self._index(pos)] = int(value)

    def positions_of(self, value: GridValue) -> List[Position]:
        """All cells holding `value`, in row-major order."""
        flat = np.flatnonzero(self.cells == int(value))
        return [Position(*divmod(int(i), self.cols)) for i in flat]

    def count(self, value: GridValue) -> int:
        return int(np.count_nonzero(self.cells == int(value)))

    def view(self) -> np.ndarray:
        """Read-only (rows, cols) view over the live buffer."""
        board = self.cells.reshape(self.rows, self.cols)
        board.flags.writeable = False
        return board
