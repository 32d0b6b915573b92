"""Collectible board items: food and power-ups."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_arcade.grid import GridPosition

DEFAULT_FOOD_LABELS: tuple[str, ...] = (
    "ES 101", "IP4I", "IP: GM", "IP: HC", "NEG", "VCPE",
)
DEFAULT_FOOD_VALUE = 10
DEFAULT_POWER_UP_LIFETIME = 15.0


class PowerUpType(enum.Enum):
    """The closed set of power-up kinds."""

    SPEED_BOOST = "speed_boost"
    SLOW_MOTION = "slow_motion"
    DOUBLE_POINTS = "double_points"
    SHIELD = "shield"

    @property
    def duration(self) -> float:
        """Default effect duration in seconds once collected."""
        return _DURATIONS[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    @property
    def affects_speed(self) -> bool:
        return self in (PowerUpType.SPEED_BOOST, PowerUpType.SLOW_MOTION)


_DURATIONS: dict[PowerUpType, float] = {
    PowerUpType.SPEED_BOOST: 5.0,
    PowerUpType.SLOW_MOTION: 7.0,
    PowerUpType.DOUBLE_POINTS: 10.0,
    PowerUpType.SHIELD: 8.0,
}

_SYMBOLS: dict[PowerUpType, str] = {
    PowerUpType.SPEED_BOOST: "⚡",
    PowerUpType.SLOW_MOTION: "🐌",
    PowerUpType.DOUBLE_POINTS: "2️⃣",
    PowerUpType.SHIELD: "🛡",
}


@dataclass(frozen=True)
class Food:
    """A single food item; *value* is the base points it awards."""

    position: GridPosition
    label: str
    value: int = DEFAULT_FOOD_VALUE

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "label": self.label,
            "value": self.value,
        }


@dataclass
class PowerUp:
    """An uncollected power-up that disappears when its lifetime runs out."""

    position: GridPosition
    type: PowerUpType
    lifetime: float = DEFAULT_POWER_UP_LIFETIME

    def update(self, delta: float) -> None:
        """Count the remaining lifetime down by *delta* seconds."""
        self.lifetime -= delta

    @property
    def is_expired(self) -> bool:
        return self.lifetime <= 0

    def to_dict(self) -> dict:
        return {
            "position": list(self.position),
            "type": self.type.value,
            "lifetime": self.lifetime,
        }
