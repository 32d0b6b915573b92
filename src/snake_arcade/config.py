"""Tunable game constants."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from snake_arcade.items import (
    DEFAULT_FOOD_LABELS,
    DEFAULT_FOOD_VALUE,
    DEFAULT_POWER_UP_LIFETIME,
    PowerUpType,
)

logger = logging.getLogger(__name__)


def _default_durations() -> dict[str, float]:
    return {t.value: t.duration for t in PowerUpType}


@dataclass(frozen=True)
class GameConfig:
    """Full game configuration.

    Supports JSON serialization so a session can be reproduced. Durations
    are keyed by :class:`PowerUpType` value.
    """

    # Board
    grid_width: int = 20
    grid_height: int = 30
    initial_snake_length: int = 3

    # Movement cadence (seconds per step)
    initial_interval: float = 0.15
    min_interval: float = 0.08
    interval_decrement: float = 0.002

    # Scoring
    food_value: int = DEFAULT_FOOD_VALUE
    combo_bonus_step: int = 5
    max_combo_bonus_steps: int = 5
    food_labels: tuple[str, ...] = DEFAULT_FOOD_LABELS

    # Power-ups
    power_up_spawn_chance: float = 0.15
    max_power_ups: int = 2
    power_up_lifetime: float = DEFAULT_POWER_UP_LIFETIME
    speed_boost_multiplier: float = 0.5
    slow_motion_multiplier: float = 1.8
    durations: dict[str, float] = field(default_factory=_default_durations)

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid_width and grid_height must be at least 1.")
        if self.initial_snake_length < 1:
            raise ValueError("initial_snake_length must be at least 1.")
        if self.grid_width // 2 - (self.initial_snake_length - 1) < 0:
            raise ValueError(
                "initial_snake_length does not fit the configured grid; "
                "increase grid_width or reduce the length."
            )
        if self.max_power_ups < 0:
            raise ValueError("max_power_ups must be >= 0.")
        # Spawning relies on at least one free cell for every placement.
        occupied = self.initial_snake_length + 1 + self.max_power_ups
        if occupied >= self.grid_width * self.grid_height:
            raise ValueError(
                "grid is too small for the snake, food and max_power_ups."
            )
        if not 0 < self.min_interval <= self.initial_interval:
            raise ValueError(
                "min_interval must be positive and not exceed initial_interval."
            )
        if self.interval_decrement < 0:
            raise ValueError("interval_decrement must be >= 0.")
        if not 0.0 <= self.power_up_spawn_chance <= 1.0:
            raise ValueError("power_up_spawn_chance must be within [0, 1].")
        if self.power_up_lifetime <= 0:
            raise ValueError("power_up_lifetime must be positive.")
        if self.speed_boost_multiplier <= 0 or self.slow_motion_multiplier <= 0:
            raise ValueError("speed multipliers must be positive.")
        if self.food_value < 0 or self.combo_bonus_step < 0:
            raise ValueError("food_value and combo_bonus_step must be >= 0.")
        if self.max_combo_bonus_steps < 0:
            raise ValueError("max_combo_bonus_steps must be >= 0.")
        if not self.food_labels:
            raise ValueError("food_labels must not be empty.")

        missing = {t.value for t in PowerUpType} - set(self.durations)
        if missing:
            raise ValueError(f"durations missing for: {sorted(missing)}")
        if any(d <= 0 for d in self.durations.values()):
            raise ValueError("durations must be positive.")

    def duration(self, power_up_type: PowerUpType) -> float:
        """Effect duration for *power_up_type* in seconds."""
        return self.durations[power_up_type.value]

    def multiplier(self, power_up_type: PowerUpType) -> float:
        """Move-interval multiplier of a speed-affecting power-up."""
        if power_up_type is PowerUpType.SPEED_BOOST:
            return self.speed_boost_multiplier
        if power_up_type is PowerUpType.SLOW_MOTION:
            return self.slow_motion_multiplier
        return 1.0

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        d = asdict(self)
        d["food_labels"] = list(self.food_labels)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        if "food_labels" in raw:
            raw["food_labels"] = tuple(raw["food_labels"])
        if "durations" in raw:
            durations = _default_durations()
            durations.update(raw["durations"])
            raw["durations"] = durations
        return cls(**raw)
