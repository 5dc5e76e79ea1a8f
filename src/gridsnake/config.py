# src/gridsnake/config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Window (pygame host only) -----
WINDOW_W, WINDOW_H = 600, 600
TITLE = "Snake!"
FPS = 60

# ----- Colors -----
BG        = (10, 10, 10)
HEAD_GREY = (178, 178, 178)
BODY_GREY = (76, 76, 76)
RED       = (255, 0, 0)

# ----- Sprite sizes, in arena cells -----
HEAD_SIZE = 0.8
BODY_SIZE = 0.65
FOOD_SIZE = 0.8


class ConfigError(ValueError):
    """Raised when a Config describes an arena the game cannot run in."""


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    arena_width: int = 10
    arena_height: int = 10
    move_every_ms: int = 150
    food_every_ms: int = 1000
    spawn_head: Tuple[int, int] = (3, 3)
    spawn_body: Tuple[int, int] = (3, 2)
    seed: Optional[int] = None     # None -> nondeterministic food placement

    def __post_init__(self):
        if self.arena_width <= 0 or self.arena_height <= 0:
            raise ConfigError(
                f"arena must be at least 1x1, got {self.arena_width}x{self.arena_height}"
            )
        if self.move_every_ms <= 0:
            raise ConfigError(f"move_every_ms must be positive, got {self.move_every_ms}")
        if self.food_every_ms <= 0:
            raise ConfigError(f"food_every_ms must be positive, got {self.food_every_ms}")

        # frozen: normalise list input through object.__setattr__
        object.__setattr__(self, "spawn_head", tuple(self.spawn_head))
        object.__setattr__(self, "spawn_body", tuple(self.spawn_body))
        for name, (x, y) in (("spawn_head", self.spawn_head), ("spawn_body", self.spawn_body)):
            if not (0 <= x < self.arena_width and 0 <= y < self.arena_height):
                raise ConfigError(f"{name} {(x, y)} is outside the arena")

        # The snake starts heading up, so the body has to sit right below the head.
        hx, hy = self.spawn_head
        if self.spawn_body != (hx, hy - 1):
            raise ConfigError(
                f"spawn_body must be directly below spawn_head {self.spawn_head}, "
                f"got {self.spawn_body}"
            )


CFG = Config()
