# src/gridsnake/render.py
"""
Read-only views of a SnakeGame for whatever is drawing it.

Everything returned here is a copy; a renderer (or another thread) can
hold on to it while the simulation keeps ticking.
"""
from __future__ import annotations
from enum import IntEnum
from typing import List, NamedTuple

import numpy as np  # type: ignore

from .config import BODY_SIZE, FOOD_SIZE, HEAD_SIZE
from .game import SnakeGame
from .grid import Position


class Sprite(NamedTuple):
    kind: str          # "head", "body" or "food"
    position: Position
    size: float        # square side, in arena cells


class Cell(IntEnum):
    EMPTY = 0
    FOOD = 1
    BODY = 2
    HEAD = 3


def sprites(game: SnakeGame) -> List[Sprite]:
    """Food first, then body, head last so it draws on top."""
    out = [Sprite("food", pos, FOOD_SIZE) for _, pos in game.food.items()]
    head, *body = game.snake.segments
    out += [Sprite("body", pos, BODY_SIZE) for pos in body]
    out.append(Sprite("head", head, HEAD_SIZE))
    return out


def occupancy(game: SnakeGame) -> np.ndarray:
    """
    (height, width) int8 grid of Cell codes, indexed [y, x].
    Later layers win: food < body < head. Cells outside the arena are skipped.
    """
    grid = np.zeros((game.grid.height, game.grid.width), dtype=np.int8)
    for sprite in sprites(game):
        if not game.grid.in_bounds(sprite.position):
            continue
        x, y = sprite.position
        grid[y, x] = Cell[sprite.kind.upper()]
    return grid
