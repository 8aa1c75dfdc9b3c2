# main.py
import argparse
import dataclasses
import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

import pygame # type: ignore

from .config import (
    HUD_HEIGHT, FPS,
    BG, BOARD_BG, SNAKE_HEAD, SNAKE_BODY, FOOD, TEXT, TITLE,
    CFG, Config,
)
from .game import GameState, InvalidConfigurationError, new_game_state
from .grid import Direction

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

# ---------- Timer ----------
@dataclass
class TickTimer:
    interval_ms: int
    last_tick: int = 0

    def reset(self, now_ms: int) -> None:
        self.last_tick = now_ms

    def ready(self, now_ms: int) -> bool:
        """True (and re-armed) once per interval."""
        if now_ms - self.last_tick < self.interval_ms:
            return False
        self.last_tick = now_ms
        return True

# ---------- Helpers ----------
def make_game(cfg: Config) -> GameState:
    rng = random.Random(cfg.seed) if cfg.seed is not None else None
    return new_game_state(cfg.rows, cfg.cols, rng)

def apply_key(state: GameState, key: int) -> bool:
    """Feed a key press to the direction queue. Return True if it was a direction key."""
    direction = KEY_TO_DIRECTION.get(key)
    if direction is None:
        return False
    state.change_direction(direction)
    return True

def draw_cell(screen: pygame.Surface, row: int, col: int, cell_size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(col * cell_size, HUD_HEIGHT + row * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

# ---------- Draw ----------
def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int) -> None:
    screen.fill(BG)
    board = pygame.Rect(0, HUD_HEIGHT, state.cols * cell_size, state.rows * cell_size)
    pygame.draw.rect(screen, BOARD_BG, board)
    # food
    for pos in state.food_positions():
        draw_cell(screen, pos.row, pos.col, cell_size, FOOD)
    # snake
    head, *body = state.snake_positions()
    for pos in body:
        draw_cell(screen, pos.row, pos.col, cell_size, SNAKE_BODY)
    draw_cell(screen, head.row, head.col, cell_size, SNAKE_HEAD)
    # score
    txt = font.render(f"Score: {state.score}", True, TEXT)
    screen.blit(txt, (8, 6))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, *lines: str) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    rendered = [font.render(title, True, TITLE)] + [font.render(line, True, TEXT) for line in lines]
    y = height // 2 - 16
    for surf in rendered:
        screen.blit(surf, surf.get_rect(center=(width // 2, y)))
        y += 30

def draw_start(screen: pygame.Surface, font: pygame.font.Font) -> None:
    draw_overlay(screen, font, "SNAKE", "Press any key to start")

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    draw_overlay(screen, font, "GAME OVER", "Press R to restart", f"Score: {score}")

# ---------- Loop ----------
def run(cfg: Config) -> None:
    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    state = make_game(cfg)
    timer = TickTimer(cfg.move_every_ms)
    started = False
    running = True

    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif not started:
                    started = True
                    timer.reset(pygame.time.get_ticks())
                    apply_key(state, event.key)
                elif state.game_over:
                    if event.key == pygame.K_r:
                        state = make_game(cfg)
                        timer.reset(pygame.time.get_ticks())
                else:
                    apply_key(state, event.key)
        if not running:
            break

        # 2) update
        if started and not state.game_over and timer.ready(pygame.time.get_ticks()):
            state.move()
            if state.game_over:
                print(f"Game over. Score: {state.score}")

        # 3) render
        draw_game(screen, font, state, cfg.cell_size)
        if not started:
            draw_start(screen, font)
        elif state.game_over:
            draw_game_over(screen, font, state.score)
        pygame.display.flip()
        clock.tick(FPS)  # movement gated by the tick timer

    pygame.quit()

def build_config(argv: Optional[list] = None) -> Tuple[argparse.ArgumentParser, Config, str]:
    parser = argparse.ArgumentParser(description="Grid snake")
    parser.add_argument("--rows", type=int, default=CFG.rows)
    parser.add_argument("--cols", type=int, default=CFG.cols)
    parser.add_argument("--cell-size", type=int, default=CFG.cell_size)
    parser.add_argument("--tick-ms", type=int, default=CFG.move_every_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (default: random)")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)

    cfg = dataclasses.replace(
        CFG,
        rows=args.rows,
        cols=args.cols,
        cell_size=args.cell_size,
        move_every_ms=args.tick_ms,
        seed=args.seed,
    )
    return parser, cfg, args.log_level

def main(argv: Optional[list] = None) -> None:
    parser, cfg, log_level = build_config(argv)
    logging.basicConfig(level=log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # validate the board before opening a window
    try:
        make_game(cfg)
    except InvalidConfigurationError as e:
        logger.error("invalid board: %s", e)
        parser.error(str(e))

    run(cfg)

if __name__ == "__main__":
    main()
