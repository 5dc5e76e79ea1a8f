# src/gridsnake/game.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional
import random

from .config import CFG, Config
from .food import FoodManager
from .grid import Direction, Grid, Position
from .score import ScoreTracker
from .snake import Snake
from .timer import IntervalTimer


class State(Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"   # only ever seen inside tick(); reset happens the same tick


class Event(Enum):
    GROWTH = "growth"
    SCORE = "score"
    GAME_OVER = "game_over"


@dataclass
class TickResult:
    moved: bool = False
    events: List[Event] = field(default_factory=list)
    reason: Optional[str] = None          # "wall" or "self" when the round ended
    final_score: Optional[int] = None     # points of the round that just ended
    spawned: List[int] = field(default_factory=list)
    despawned: List[int] = field(default_factory=list)

    @property
    def game_over(self) -> bool:
        return Event.GAME_OVER in self.events


@dataclass
class RoundSummary:
    score: int
    moves: int
    reason: str


class SnakeGame:
    """
    The round controller. Owns the snake, the food, the score and the
    movement timer, and is the only thing that mutates them.

    Drive it with tick(elapsed_ms, direction) once per frame; read it back
    through .snake / .food / .score or gridsnake.render.
    """

    def __init__(
        self,
        cfg: Config = CFG,
        notify: Callable[[str], None] = print,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.notify = notify
        self.rng = rng if rng is not None else random.Random(cfg.seed)

        self.grid = Grid(cfg.arena_width, cfg.arena_height)
        self.snake = Snake.spawn(cfg.spawn_head, cfg.spawn_body)
        self.food = FoodManager(self.grid, cfg.food_every_ms)
        self.score = ScoreTracker()
        self.move_timer = IntervalTimer(cfg.move_every_ms)

        self.state = State.RUNNING
        self.moves = 0                          # advances in the current round
        self.history: List[RoundSummary] = []

    # ---------- One frame ----------
    def tick(self, elapsed_ms: float, direction: Optional[Direction] = None) -> TickResult:
        """
        Advance the simulation by elapsed_ms of wall time.
        - input is accepted every tick
        - the snake moves at most once, and only when the move timer fires
        - food spawns on its own timer, independent of movement
        """
        if elapsed_ms < 0:
            raise ValueError(f"elapsed_ms cannot be negative, got {elapsed_ms}")
        if direction is not None and not isinstance(direction, Direction):
            raise TypeError(f"expected a Direction, got {direction!r}")

        result = TickResult()

        # 1) input
        if direction is not None and not self.snake.set_heading(direction):
            self.notify(f"Cannot reverse from {self.snake.heading.name} to {direction.name}")

        # 2) movement, gated on the timer
        if self.move_timer.tick(elapsed_ms) > 0:
            self._step(result)

        # 3) food on its own cadence, then clean up anything under the snake.
        #    A round that just ended starts with an empty board; the timer still runs.
        due = self.food.tick(elapsed_ms)
        if result.game_over:
            due = 0
        for _ in range(due):
            result.spawned.append(self.food.spawn_random(self.rng))
        for food_id in self.food.overlap_scan(self.snake.segments):
            self.food.remove(food_id)
            result.despawned.append(food_id)

        return result

    def _step(self, result: TickResult) -> None:
        new_head, vacated = self.snake.advance()
        self.moves += 1
        result.moved = True

        if not self.grid.in_bounds(new_head):
            result.reason = "wall"
        elif self.snake.contains_body(new_head):
            result.reason = "self"

        if result.reason is not None:
            self.state = State.GAME_OVER
            result.events.append(Event.GAME_OVER)
        else:
            eaten = self.food.at(new_head)
            for food_id in eaten:
                self.food.remove(food_id)
            if eaten:
                result.despawned.extend(eaten)
                result.events += [Event.GROWTH, Event.SCORE]

        if Event.GAME_OVER in result.events:
            self._end_round(result)
        if Event.GROWTH in result.events:
            self.snake.grow(vacated)
        if Event.SCORE in result.events:
            self.score.increment()
        self.snake.settle()

    def _end_round(self, result: TickResult) -> None:
        points = self.score.value()
        result.final_score = points
        result.despawned.extend(self.food.clear())
        if points != 0:
            self.notify(f"Points for this round are {points}")
        self.history.append(RoundSummary(score=points, moves=self.moves, reason=result.reason))

        self.score.reset()
        self.snake = Snake.spawn(self.cfg.spawn_head, self.cfg.spawn_body)
        self.moves = 0
        self.state = State.RUNNING

    # ---------- Convenience ----------
    @property
    def points(self) -> int:
        return self.score.value()

    def place_snake(self, segments, heading: Direction) -> None:
        """Swap in an arbitrary snake (scenarios, tests, replays)."""
        self.snake = Snake(segments, heading)

    def spawn_food(self, pos) -> int:
        return self.food.spawn_at(Position(*pos))
