"""Tests for Config validation."""

import dataclasses

import pytest

from gridsnake.config import CFG, Config, ConfigError


class TestConfig:

    def test_defaults(self):
        assert (CFG.arena_width, CFG.arena_height) == (10, 10)
        assert CFG.move_every_ms == 150
        assert CFG.food_every_ms == 1000
        assert CFG.spawn_head == (3, 3)
        assert CFG.spawn_body == (3, 2)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"arena_width": 0},
            {"arena_height": -1},
            {"move_every_ms": 0},
            {"food_every_ms": -5},
            {"spawn_head": (10, 3), "spawn_body": (10, 2)},
            {"spawn_head": (3, 0), "spawn_body": (3, -1)},
            {"spawn_body": (2, 3)},
            {"spawn_body": (3, 4)},
        ],
    )
    def test_invalid_configs_rejected(self, kwargs):
        with pytest.raises(ConfigError):
            Config(**kwargs)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            Config(arena_width=0)

    def test_spawn_cells_accept_lists(self):
        cfg = Config(spawn_head=[1, 1], spawn_body=[1, 0])
        assert cfg.spawn_head == (1, 1)

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.arena_width = 0
