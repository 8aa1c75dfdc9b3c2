from __future__ import annotations

import pytest

from snakegrid.grid import Direction, Grid, GridValue, Position


def test_direction_opposites() -> None:
    assert Direction.UP.opposite == Direction.DOWN
    assert Direction.DOWN.opposite == Direction.UP
    assert Direction.LEFT.opposite == Direction.RIGHT
    assert Direction.RIGHT.opposite == Direction.LEFT
    for d in Direction:
        assert abs(d.row_offset) + abs(d.col_offset) == 1
        assert d.opposite.opposite == d


def test_position_value_semantics() -> None:
    a = Position(2, 3)
    assert a == Position(2, 3)
    assert a != Position(3, 2)
    assert len({a, Position(2, 3)}) == 1
    with pytest.raises(AttributeError):
        a.row = 5  # type: ignore[misc]


def test_position_translate() -> None:
    p = Position(5, 5)
    assert p.translate(Direction.UP) == Position(4, 5)
    assert p.translate(Direction.DOWN) == Position(6, 5)
    assert p.translate(Direction.LEFT) == Position(5, 4)
    assert p.translate(Direction.RIGHT) == Position(5, 6)


def test_grid_flat_layout() -> None:
    g = Grid(3, 4)
    assert g.cells.shape == (12,)
    g.set(Position(1, 2), GridValue.FOOD)
    assert g.cells[1 * 4 + 2] == GridValue.FOOD
    assert g.view()[1, 2] == GridValue.FOOD
    assert g.positions_of(GridValue.FOOD) == [Position(1, 2)]
    assert g.count(GridValue.EMPTY) == 11


def test_grid_outside_lookup() -> None:
    g = Grid(3, 4)
    for pos in (Position(-1, 0), Position(0, -1), Position(3, 0), Position(0, 4)):
        assert not g.in_bounds(pos)
        assert g.get(pos) == GridValue.OUTSIDE
    assert g.get(Position(2, 3)) == GridValue.EMPTY


def test_grid_rejects_bad_writes() -> None:
    g = Grid(3, 4)
    with pytest.raises(ValueError):
        g.set(Position(0, 0), GridValue.OUTSIDE)
    with pytest.raises(IndexError):
        g.set(Position(3, 0), GridValue.SNAKE)


def test_view_tracks_live_buffer() -> None:
    g = Grid(2, 2)
    board = g.view()
    g.set(Position(1, 1), GridValue.SNAKE)
    assert board[1, 1] == GridValue.SNAKE
    assert g.cells.flags.writeable
