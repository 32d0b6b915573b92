"""Food and power-up placement logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.grid import Grid, GridPosition
from snake_arcade.items import Food, PowerUp, PowerUpType
from snake_arcade.snake import Snake

logger = logging.getLogger(__name__)

_POWER_UP_TYPES: tuple[PowerUpType, ...] = tuple(PowerUpType)


class ItemSpawner:
    """Places food and power-ups on free cells by rejection sampling.

    Uses a NumPy RNG for deterministic, reproducible placement. Sampling
    is unbounded; :class:`GameConfig` validation keeps at least one cell
    free for every placement the engine requests.
    """

    def __init__(
        self,
        grid: Grid,
        config: GameConfig,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.grid = grid
        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng()
        self._label_index = 0

    def reset(self) -> None:
        """Rewind the food label cycle for a new session."""
        self._label_index = 0

    def random_cell(self) -> GridPosition:
        """Draw a uniformly random cell of the grid."""
        return GridPosition(
            int(self.rng.integers(0, self.grid.width)),
            int(self.rng.integers(0, self.grid.height)),
        )

    def spawn_food(
        self, snake: Snake, power_ups: Sequence[PowerUp] = (),
    ) -> Food:
        """Create food on a cell clear of the snake and all power-ups."""
        taken = {p.position for p in power_ups}
        position = self.random_cell()
        while snake.contains(position) or position in taken:
            position = self.random_cell()

        labels = self.config.food_labels
        self._label_index = (self._label_index + 1) % len(labels)
        food = Food(position, labels[self._label_index], self.config.food_value)
        logger.debug("Spawned food %r at %s.", food.label, position)
        return food

    def should_spawn_power_up(self) -> bool:
        """Bernoulli trial with the configured spawn chance."""
        return bool(self.rng.random() < self.config.power_up_spawn_chance)

    def spawn_power_up(
        self,
        snake: Snake,
        food: Food | None,
        power_ups: Sequence[PowerUp],
    ) -> PowerUp | None:
        """Create a power-up, or return ``None`` when the board is at the cap."""
        if len(power_ups) >= self.config.max_power_ups:
            return None

        taken = {p.position for p in power_ups}
        if food is not None:
            taken.add(food.position)
        position = self.random_cell()
        while snake.contains(position) or position in taken:
            position = self.random_cell()

        power_up_type = _POWER_UP_TYPES[
            int(self.rng.integers(0, len(_POWER_UP_TYPES)))
        ]
        power_up = PowerUp(position, power_up_type, self.config.power_up_lifetime)
        logger.debug("Spawned %s power-up at %s.", power_up_type.value, position)
        return power_up
