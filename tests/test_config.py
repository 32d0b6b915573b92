"""Tests for GameConfig."""

import json

import pytest

from snake_arcade.config import GameConfig
from snake_arcade.items import PowerUpType


class TestGameConfigDefaults:
    def test_defaults(self):
        cfg = GameConfig()
        assert (cfg.grid_width, cfg.grid_height) == (20, 30)
        assert cfg.initial_interval == 0.15
        assert cfg.min_interval == 0.08
        assert cfg.interval_decrement == 0.002
        assert cfg.food_value == 10
        assert cfg.power_up_spawn_chance == 0.15
        assert cfg.max_power_ups == 2

    def test_duration_lookup(self):
        cfg = GameConfig(durations={
            "speed_boost": 1.0, "slow_motion": 2.0,
            "double_points": 3.0, "shield": 4.0,
        })
        assert cfg.duration(PowerUpType.SHIELD) == 4.0

    def test_multipliers(self):
        cfg = GameConfig()
        assert cfg.multiplier(PowerUpType.SPEED_BOOST) == 0.5
        assert cfg.multiplier(PowerUpType.SLOW_MOTION) == 1.8
        assert cfg.multiplier(PowerUpType.SHIELD) == 1.0


class TestGameConfigValidation:
    def test_snake_must_fit(self):
        with pytest.raises(ValueError, match="initial_snake_length"):
            GameConfig(grid_width=4, initial_snake_length=4)

    def test_board_needs_free_cells(self):
        with pytest.raises(ValueError, match="too small"):
            GameConfig(
                grid_width=3, grid_height=1,
                initial_snake_length=1, max_power_ups=1,
            )

    def test_interval_ordering(self):
        with pytest.raises(ValueError, match="min_interval"):
            GameConfig(initial_interval=0.05, min_interval=0.08)

    def test_probability_range(self):
        with pytest.raises(ValueError, match="power_up_spawn_chance"):
            GameConfig(power_up_spawn_chance=1.5)

    def test_missing_duration(self):
        with pytest.raises(ValueError, match="durations missing"):
            GameConfig(durations={"shield": 8.0})

    def test_empty_labels(self):
        with pytest.raises(ValueError, match="food_labels"):
            GameConfig(food_labels=())


class TestGameConfigSerialization:
    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(grid_width=12, grid_height=14, food_labels=("a", "b"))
        path = tmp_path / "sub" / "game.json"
        cfg.save(path)
        raw = json.loads(path.read_text())
        assert raw["food_labels"] == ["a", "b"]
        assert GameConfig.load(path) == cfg

    def test_partial_durations_fill_defaults(self, tmp_path):
        path = tmp_path / "game.json"
        path.write_text(json.dumps({"durations": {"shield": 2.0}}))
        cfg = GameConfig.load(path)
        assert cfg.duration(PowerUpType.SHIELD) == 2.0
        assert cfg.duration(PowerUpType.SPEED_BOOST) == 5.0
