# src/snakegrid/__init__.py
"""Grid snake: rules engine plus a pygame shell."""

from snakegrid.grid import Direction, GridValue, Position
from snakegrid.game import (
    GameState,
    InvalidConfigurationError,
    change_direction,
    new_game_state,
    step_game,
)

__all__ = [
    "Direction",
    "GameState",
    "GridValue",
    "InvalidConfigurationError",
    "Position",
    "change_direction",
    "new_game_state",
    "step_game",
]
