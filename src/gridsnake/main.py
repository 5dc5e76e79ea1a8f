# src/gridsnake/main.py
from __future__ import annotations
import argparse
import sys
from typing import List, Optional, Tuple

import pygame  # type: ignore

from .config import (
    WINDOW_W, WINDOW_H, TITLE, FPS,
    BG, HEAD_GREY, BODY_GREY, RED,
    Config, ConfigError,
)
from .game import SnakeGame
from .grid import Direction
from .render import sprites

KEYS = {
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_UP: Direction.UP,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_DOWN: Direction.DOWN,
}

COLORS = {"head": HEAD_GREY, "body": BODY_GREY, "food": RED}


def poll_input(events) -> Tuple[Optional[Direction], bool]:
    """Last arrow key pressed this frame, and whether to keep running."""
    direction = None
    for event in events:
        if event.type == pygame.QUIT:
            return direction, False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return direction, False
            direction = KEYS.get(event.key, direction)
    return direction, True


def draw(screen: pygame.Surface, game: SnakeGame) -> None:
    screen.fill(BG)
    w, h = screen.get_size()
    cell_w = w / game.grid.width
    cell_h = h / game.grid.height
    for sprite in sprites(game):
        x, y = sprite.position
        # arena y grows upward, screen y grows downward
        cx = (x + 0.5) * cell_w
        cy = (game.grid.height - y - 0.5) * cell_h
        sw, sh = sprite.size * cell_w, sprite.size * cell_h
        pygame.draw.rect(screen, COLORS[sprite.kind], pygame.Rect(cx - sw / 2, cy - sh / 2, sw, sh))
    pygame.display.flip()


def build_parser() -> argparse.ArgumentParser:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="gridsnake", description="Play snake on a small grid.")
    parser.add_argument("--width", type=int, default=defaults.arena_width, help="arena columns")
    parser.add_argument("--height", type=int, default=defaults.arena_height, help="arena rows")
    parser.add_argument("--move-ms", type=int, default=defaults.move_every_ms, help="ms between snake moves")
    parser.add_argument("--food-ms", type=int, default=defaults.food_every_ms, help="ms between food drops")
    parser.add_argument("--seed", type=int, default=None, help="seed food placement")
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        arena_width=args.width,
        arena_height=args.height,
        move_every_ms=args.move_ms,
        food_every_ms=args.food_ms,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = config_from_args(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    pygame.init()
    screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
    pygame.display.set_caption(TITLE)
    clock = pygame.time.Clock()

    game = SnakeGame(cfg)
    running = True

    while running:
        # 1) input
        direction, running = poll_input(pygame.event.get())
        if not running:
            break

        # 2) update; clock.tick() returns ms since the previous frame
        game.tick(clock.tick(FPS), direction)

        # 3) render
        draw(screen, game)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
