# src/gridsnake/food.py
from __future__ import annotations
from itertools import count
from typing import Dict, Iterable, List, Set, Tuple
import random

from .grid import Grid, Position
from .timer import IntervalTimer


class FoodManager:
    """
    Owns every food item in the arena, keyed by id.

    Food is dropped on a fixed timer at a uniformly random cell. Spawning
    never looks at what is already there: two items can share a cell and
    food can land inside the snake (overlap_scan() finds those).
    """

    def __init__(self, grid: Grid, every_ms: float = 1000):
        self.grid = grid
        self.timer = IntervalTimer(every_ms)
        self._items: Dict[int, Position] = {}
        self._ids = count(1)

    def tick(self, elapsed_ms: float) -> int:
        """Number of spawns due after elapsed_ms more time has passed."""
        return self.timer.tick(elapsed_ms)

    def spawn_at(self, pos: Tuple[int, int]) -> int:
        food_id = next(self._ids)
        self._items[food_id] = Position(*pos)
        return food_id

    def spawn_random(self, rng: random.Random) -> int:
        return self.spawn_at(self.grid.random_cell(rng))

    def remove(self, food_id: int) -> None:
        del self._items[food_id]

    def clear(self) -> List[int]:
        removed = list(self._items)
        self._items.clear()
        return removed

    def at(self, pos: Position) -> List[int]:
        return [food_id for food_id, p in self._items.items() if p == pos]

    def overlap_scan(self, positions: Iterable[Position]) -> Set[int]:
        """Ids of food sitting on any of the given cells."""
        occupied = set(positions)
        return {food_id for food_id, p in self._items.items() if p in occupied}

    def items(self) -> List[Tuple[int, Position]]:
        return list(self._items.items())

    def __len__(self) -> int:
        return len(self._items)
