"""Tests for the ItemSpawner module."""

from collections import deque

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.grid import Grid, GridPosition
from snake_arcade.items import DEFAULT_FOOD_LABELS, Food, PowerUp, PowerUpType
from snake_arcade.snake import Snake
from snake_arcade.spawner import ItemSpawner


def _spawner(seed: int = 0, **overrides) -> ItemSpawner:
    cfg = GameConfig(**overrides)
    return ItemSpawner(
        Grid(cfg.grid_width, cfg.grid_height), cfg,
        rng=np.random.default_rng(seed),
    )


def _snake_covering_all_but(width: int, height: int, free: GridPosition) -> Snake:
    snake = Snake(GridPosition(0, 0), length=1)
    snake.body = deque(
        GridPosition(x, y)
        for y in range(height) for x in range(width)
        if GridPosition(x, y) != free
    )
    return snake


class TestFoodSpawning:
    def test_food_avoids_snake(self):
        spawner = _spawner(grid_width=3, grid_height=3, initial_snake_length=1)
        free = GridPosition(2, 2)
        snake = _snake_covering_all_but(3, 3, free)
        for _ in range(5):
            assert spawner.spawn_food(snake).position == free

    def test_food_avoids_power_ups(self):
        spawner = _spawner(grid_width=3, grid_height=3, initial_snake_length=1)
        snake = _snake_covering_all_but(3, 3, GridPosition(2, 2))
        snake.body.remove(GridPosition(0, 0))
        blocker = PowerUp(GridPosition(2, 2), PowerUpType.SHIELD)
        food = spawner.spawn_food(snake, [blocker])
        assert food.position == GridPosition(0, 0)

    def test_labels_cycle_from_second(self):
        spawner = _spawner()
        snake = Snake(GridPosition(10, 15))
        labels = [spawner.spawn_food(snake).label for _ in range(7)]
        expected = list(DEFAULT_FOOD_LABELS[1:]) + list(DEFAULT_FOOD_LABELS[:2])
        assert labels == expected

    def test_reset_rewinds_labels(self):
        spawner = _spawner()
        snake = Snake(GridPosition(10, 15))
        first = spawner.spawn_food(snake).label
        spawner.spawn_food(snake)
        spawner.reset()
        assert spawner.spawn_food(snake).label == first

    def test_food_value_from_config(self):
        spawner = _spawner(food_value=7)
        assert spawner.spawn_food(Snake(GridPosition(10, 15))).value == 7

    def test_deterministic(self):
        snake = Snake(GridPosition(10, 15))
        a = [_spawner(42).spawn_food(snake).position for _ in range(3)]
        b = [_spawner(42).spawn_food(snake).position for _ in range(3)]
        assert a == b


class TestPowerUpSpawning:
    def test_respects_cap(self):
        spawner = _spawner(max_power_ups=2)
        snake = Snake(GridPosition(10, 15))
        existing = [
            PowerUp(GridPosition(0, 0), PowerUpType.SHIELD),
            PowerUp(GridPosition(1, 0), PowerUpType.SHIELD),
        ]
        assert spawner.spawn_power_up(snake, None, existing) is None

    def test_avoids_food_and_others(self):
        spawner = _spawner(grid_width=3, grid_height=3, initial_snake_length=1)
        snake = _snake_covering_all_but(3, 3, GridPosition(2, 2))
        snake.body.remove(GridPosition(0, 0))
        snake.body.remove(GridPosition(1, 0))
        food = Food(GridPosition(0, 0), "x")
        other = PowerUp(GridPosition(1, 0), PowerUpType.SHIELD)
        power_up = spawner.spawn_power_up(snake, food, [other])
        assert power_up is not None
        assert power_up.position == GridPosition(2, 2)

    def test_lifetime_and_type(self):
        spawner = _spawner(power_up_lifetime=9.0)
        power_up = spawner.spawn_power_up(Snake(GridPosition(10, 15)), None, [])
        assert power_up.lifetime == 9.0
        assert power_up.type in PowerUpType

    def test_all_types_reachable(self):
        spawner = _spawner(seed=3)
        snake = Snake(GridPosition(10, 15))
        seen = {spawner.spawn_power_up(snake, None, []).type for _ in range(100)}
        assert seen == set(PowerUpType)

    def test_spawn_chance_bounds(self):
        assert not _spawner(power_up_spawn_chance=0.0).should_spawn_power_up()
        assert _spawner(power_up_spawn_chance=1.0).should_spawn_power_up()
