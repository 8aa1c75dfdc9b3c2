# game.py
"""Snake rules engine: board, body, direction queue and food."""
from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Protocol, Tuple
import logging
import random

import numpy as np  # type: ignore

from .config import CFG, DEFAULT_SNAKE_LENGTH
from .grid import Direction, Grid, GridValue, Position

logger = logging.getLogger(__name__)

MAX_PENDING_DIRECTIONS = 2


class InvalidConfigurationError(ValueError):
    def __init__(self, message: str, *, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        super().__init__(f"{message} (rows={rows}, cols={cols})")


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


# ---------- State ----------
class GameState:
    """
    One game session.

    The snake starts with length 3 on the middle row, head at column 3,
    facing right, with one food cell on the board. Call `move()` once per
    tick and `change_direction()` from input handlers in between.
    """

    def __init__(self, rows: int, cols: int, rng: Optional[RandomSource] = None):
        if cols <= DEFAULT_SNAKE_LENGTH:
            raise InvalidConfigurationError(
                f"The number of columns must be greater than the snake's "
                f"default length: {DEFAULT_SNAKE_LENGTH}",
                rows=rows, cols=cols,
            )
        if rows < 1:
            raise InvalidConfigurationError("The grid needs at least one row", rows=rows, cols=cols)

        self.rows = rows
        self.cols = cols
        self.rng: RandomSource = rng if rng is not None else random.Random(CFG.seed)
        self.direction = Direction.RIGHT
        self.score = 0
        self.game_over = False

        self._grid = Grid(rows, cols)
        self._body: Deque[Position] = deque()       # head at index 0
        self._dir_changes: Deque[Direction] = deque()

        self._add_snake()
        self._add_food()
        logger.debug("new %dx%d game, head at %s", rows, cols, self.head_position())

    # ----- setup -----
    def _add_snake(self) -> None:
        r = self.rows // 2
        for c in range(1, DEFAULT_SNAKE_LENGTH + 1):
            self._add_head(Position(r, c))

    def _add_food(self) -> None:
        empty = self._grid.positions_of(GridValue.EMPTY)
        if not empty:
            return
        pos = empty[self.rng.randrange(len(empty))]
        self._grid.set(pos, GridValue.FOOD)

    # ----- accessors -----
    @property
    def grid(self) -> np.ndarray:
        return self._grid.view()

    def cell(self, pos: Position) -> GridValue:
        return self._grid.get(pos)

    def head_position(self) -> Position:
        return self._body[0]

    def tail_position(self) -> Position:
        return self._body[-1]

    def snake_positions(self) -> Tuple[Position, ...]:
        return tuple(self._body)

    def food_positions(self) -> Tuple[Position, ...]:
        return tuple(self._grid.positions_of(GridValue.FOOD))

    def pending_directions(self) -> Tuple[Direction, ...]:
        return tuple(self._dir_changes)

    # ----- body mutation -----
    def _add_head(self, pos: Position) -> None:
        self._body.appendleft(pos)
        self._grid.set(pos, GridValue.SNAKE)

    def _remove_tail(self) -> None:
        tail = self._body.pop()
        self._grid.set(tail, GridValue.EMPTY)

    # ----- direction queue -----
    def _last_direction(self) -> Direction:
        return self._dir_changes[-1] if self._dir_changes else self.direction

    def _can_change_direction(self, new_dir: Direction) -> bool:
        if len(self._dir_changes) >= MAX_PENDING_DIRECTIONS:
            return False
        last = self._last_direction()
        return new_dir != last and new_dir != last.opposite

    def change_direction(self, direction: Direction) -> None:
        """Queue a turn for a later tick; duplicates and reversals are dropped."""
        if self.game_over:
            return
        if self._can_change_direction(direction):
            self._dir_changes.append(direction)

    # ----- movement -----
    def _will_hit(self, new_head: Position) -> GridValue:
        if not self._grid.in_bounds(new_head):
            return GridValue.OUTSIDE
        # the tail leaves its cell on this same tick
        if new_head == self.tail_position():
            return GridValue.EMPTY
        return self._grid.get(new_head)

    def move(self) -> Optional[GridValue]:
        """
        Advance the snake by one cell.
        Returns what the head ran into, or None if the game was already over.
        """
        if self.game_over:
            return None

        if self._dir_changes:
            self.direction = self._dir_changes.popleft()

        new_head = self.head_position().translate(self.direction)
        hit = self._will_hit(new_head)

        if hit in (GridValue.OUTSIDE, GridValue.SNAKE):
            self.game_over = True
            logger.debug("game over: hit %s at %s, score %d", hit.name, new_head, self.score)
        elif hit == GridValue.EMPTY:
            self._remove_tail()
            self._add_head(new_head)
        elif hit == GridValue.FOOD:
            self._add_head(new_head)
            self.score += 1
            self._add_food()
            logger.debug("food eaten at %s, score %d", new_head, self.score)
        return hit


# ---------- Module-level API ----------
def new_game_state(rows: int, cols: int, rng: Optional[RandomSource] = None) -> GameState:
    return GameState(rows, cols, rng)


def change_direction(state: GameState, direction: Direction) -> None:
    state.change_direction(direction)


def step_game(state: GameState) -> Optional[GridValue]:
    """Advance the game by one tick. Check `state.game_over` afterwards."""
    return state.move()
