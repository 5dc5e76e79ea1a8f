# src/gridsnake/grid.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, NamedTuple
import random


class Direction(Enum):
    """Grid headings as (dx, dy). y grows upward, like the arena it moves in."""
    LEFT  = (-1, 0)
    UP    = (0, 1)
    RIGHT = (1, 0)
    DOWN  = (0, -1)

    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class Position(NamedTuple):
    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.value
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Grid:
    width: int
    height: int

    def in_bounds(self, pos: Position) -> bool:
        """Check if a cell is inside the arena."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def random_cell(self, rng: random.Random) -> Position:
        """Uniformly random cell. Does not care what is already there."""
        return Position(rng.randrange(self.width), rng.randrange(self.height))

    def cells(self) -> Iterator[Position]:
        for y in range(self.height):
            for x in range(self.width):
                yield Position(x, y)
