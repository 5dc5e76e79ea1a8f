import pytest

from gridsnake.config import Config
from gridsnake.game import SnakeGame

# Food timer long enough that nothing spawns on its own during a test.
NO_FOOD_MS = 10 ** 9


@pytest.fixture
def messages():
    return []


@pytest.fixture
def game(messages):
    """Default 10x10 game, no timed food, diagnostics captured in `messages`."""
    return SnakeGame(Config(food_every_ms=NO_FOOD_MS, seed=0), notify=messages.append)
