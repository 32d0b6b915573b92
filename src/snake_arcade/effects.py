"""Timed power-up effects and the move interval they modify."""

from __future__ import annotations

import logging

from snake_arcade.config import GameConfig
from snake_arcade.items import PowerUpType

logger = logging.getLogger(__name__)

_SPEED_TYPES = (PowerUpType.SPEED_BOOST, PowerUpType.SLOW_MOTION)


class EffectRegistry:
    """Tracks active effects and owns the base and current move intervals.

    An effect is active exactly while its type is a key of the remaining
    time mapping. When both speed effects are active, the one applied last
    sets the interval.
    """

    def __init__(self, config: GameConfig) -> None:
        self.config = config
        self._remaining: dict[PowerUpType, float] = {}
        self._last_speed_effect: PowerUpType | None = None
        self.base_interval = config.initial_interval
        self.move_interval = config.initial_interval

    @property
    def active(self) -> dict[PowerUpType, float]:
        """Copy of the active effects and their remaining seconds."""
        return dict(self._remaining)

    def is_active(self, power_up_type: PowerUpType) -> bool:
        return power_up_type in self._remaining

    def remaining(self, power_up_type: PowerUpType) -> float:
        """Remaining seconds for *power_up_type*, 0.0 when inactive."""
        return self._remaining.get(power_up_type, 0.0)

    def reset(self) -> None:
        """Clear all effects and restore the initial intervals."""
        self._remaining.clear()
        self._last_speed_effect = None
        self.base_interval = self.config.initial_interval
        self.move_interval = self.config.initial_interval

    def activate(self, power_up_type: PowerUpType) -> None:
        """Start or refresh an effect for its full duration."""
        self._remaining[power_up_type] = self.config.duration(power_up_type)
        if power_up_type.affects_speed:
            self._last_speed_effect = power_up_type
            self.move_interval = (
                self.base_interval * self.config.multiplier(power_up_type)
            )
        logger.debug(
            "Activated %s for %.1fs (interval %.3fs).",
            power_up_type.value, self._remaining[power_up_type],
            self.move_interval,
        )

    def tick(self, delta: float) -> list[PowerUpType]:
        """Advance all effects by *delta* seconds.

        Returns the effect types that expired during this tick.
        """
        expired: list[PowerUpType] = []
        for power_up_type, left in self._remaining.items():
            left -= delta
            if left <= 0:
                expired.append(power_up_type)
            else:
                self._remaining[power_up_type] = left

        for power_up_type in expired:
            del self._remaining[power_up_type]
        for power_up_type in expired:
            self._on_expired(power_up_type)
        return expired

    def accelerate(self) -> None:
        """Shorten the base interval after food, floored at the minimum.

        The current interval snaps to the new base, overriding any
        speed boost still running.
        """
        self.base_interval = max(
            self.config.min_interval,
            self.base_interval - self.config.interval_decrement,
        )
        self.move_interval = self.base_interval

    def _on_expired(self, power_up_type: PowerUpType) -> None:
        logger.debug("Effect %s expired.", power_up_type.value)
        if not power_up_type.affects_speed:
            return
        still_active = [t for t in _SPEED_TYPES if t in self._remaining]
        if not still_active:
            self._last_speed_effect = None
            self.move_interval = self.base_interval
            return
        if self._last_speed_effect not in still_active:
            self._last_speed_effect = still_active[0]
        self.move_interval = (
            self.base_interval * self.config.multiplier(self._last_speed_effect)
        )
