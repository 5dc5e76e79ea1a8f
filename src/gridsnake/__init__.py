# src/gridsnake/__init__.py
"""Simulation core for a grid snake game."""

from gridsnake.config import CFG, Config, ConfigError
from gridsnake.game import Event, RoundSummary, SnakeGame, State, TickResult
from gridsnake.grid import Direction, Grid, Position

__all__ = [
    "CFG", "Config", "ConfigError",
    "Event", "RoundSummary", "SnakeGame", "State", "TickResult",
    "Direction", "Grid", "Position",
]
