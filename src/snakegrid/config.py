from dataclasses import dataclass
from typing import Optional

# ----- Grid -----
ROWS, COLS = 20, 20
DEFAULT_SNAKE_LENGTH = 3

# ----- Window -----
CELL_SIZE = 28
HUD_HEIGHT = 32
FPS = 60

# ----- Colors -----
BG         = (20, 20, 24)
BOARD_BG   = (28, 34, 41)
SNAKE_HEAD = (69, 212, 131)
SNAKE_BODY = (31, 184, 107)
FOOD       = (255, 92, 116)
TEXT       = (220, 220, 230)
TITLE      = (240, 240, 250)

# ----- Tunables -----
@dataclass
class Config:
    rows: int = ROWS
    cols: int = COLS
    cell_size: int = CELL_SIZE
    move_every_ms: int = 120
    seed: Optional[int] = None

    @property
    def window_size(self):
        return self.cols * self.cell_size, self.rows * self.cell_size + HUD_HEIGHT

CFG = Config()
