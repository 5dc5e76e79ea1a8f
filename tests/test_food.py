"""Tests for FoodManager spawning, removal and overlap clean-up."""

import random

import pytest

from gridsnake.food import FoodManager
from gridsnake.grid import Grid, Position


@pytest.fixture
def food():
    return FoodManager(Grid(10, 10), every_ms=1000)


class TestSpawnCadence:

    def test_exactly_one_interval(self, food):
        assert food.tick(1000) == 1

    def test_just_short(self, food):
        assert food.tick(999) == 0

    def test_remainder_carried(self, food):
        assert food.tick(2500) == 2
        assert food.tick(500) == 1

    def test_repeats_indefinitely(self, food):
        assert sum(food.tick(100) for _ in range(100)) == 10


class TestItems:

    def test_spawn_and_remove(self, food):
        food_id = food.spawn_at((2, 2))
        assert food.items() == [(food_id, Position(2, 2))]
        food.remove(food_id)
        assert len(food) == 0

    def test_remove_unknown_id(self, food):
        with pytest.raises(KeyError):
            food.remove(42)

    def test_stacking_allowed(self, food):
        """Spawning does not look for food already on the cell."""
        a = food.spawn_at((4, 4))
        b = food.spawn_at((4, 4))
        assert a != b
        assert sorted(food.at(Position(4, 4))) == sorted([a, b])

    def test_spawn_random_in_bounds(self, food):
        rng = random.Random(3)
        ids = [food.spawn_random(rng) for _ in range(50)]
        assert len(food) == 50
        assert len(set(ids)) == 50
        assert all(food.grid.in_bounds(p) for _, p in food.items())

    def test_clear(self, food):
        ids = [food.spawn_at((i, 0)) for i in range(3)]
        assert sorted(food.clear()) == sorted(ids)
        assert len(food) == 0


class TestOverlapScan:

    def test_finds_food_under_snake(self, food):
        under = food.spawn_at((3, 2))
        also_under = food.spawn_at((3, 3))
        free = food.spawn_at((7, 7))
        hits = food.overlap_scan([Position(3, 3), Position(3, 2)])
        assert hits == {under, also_under}
        assert free not in hits

    def test_scan_does_not_remove(self, food):
        food.spawn_at((1, 1))
        food.overlap_scan([Position(1, 1)])
        assert len(food) == 1
