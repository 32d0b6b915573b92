"""Outbound game notifications for presentation layers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from snake_arcade.engine import GameState
    from snake_arcade.grid import GridPosition
    from snake_arcade.items import PowerUpType

logger = logging.getLogger(__name__)


class GameEventObserver(Protocol):
    """Callback surface an observer must provide."""

    def on_score_changed(self, score: int) -> None: ...

    def on_game_state_changed(self, state: GameState) -> None: ...

    def on_food_eaten(self, position: GridPosition, value: int) -> None: ...

    def on_power_up_collected(self, power_up_type: PowerUpType) -> None: ...


class EventDispatcher:
    """Ordered, synchronous fan-out to registered observers.

    Events are delivered in registration order and never buffered, so an
    observer only sees events raised after it was added.
    """

    def __init__(self) -> None:
        self._observers: list[GameEventObserver] = []

    def __len__(self) -> int:
        return len(self._observers)

    def add(self, observer: GameEventObserver) -> None:
        self._observers.append(observer)

    def remove(self, observer: GameEventObserver) -> bool:
        """Unregister *observer*. Returns True if it was registered."""
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    def score_changed(self, score: int) -> None:
        for observer in list(self._observers):
            observer.on_score_changed(score)

    def game_state_changed(self, state: GameState) -> None:
        for observer in list(self._observers):
            observer.on_game_state_changed(state)

    def food_eaten(self, position: GridPosition, value: int) -> None:
        for observer in list(self._observers):
            observer.on_food_eaten(position, value)

    def power_up_collected(self, power_up_type: PowerUpType) -> None:
        for observer in list(self._observers):
            observer.on_power_up_collected(power_up_type)


class LoggingObserver:
    """Writes every game event to a logger."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_score_changed(self, score: int) -> None:
        self.log.info("Score: %d", score)

    def on_game_state_changed(self, state: GameState) -> None:
        self.log.info("State: %s", state.value)

    def on_food_eaten(self, position: GridPosition, value: int) -> None:
        self.log.info("Food eaten at (%d, %d) for %d points.", *position, value)

    def on_power_up_collected(self, power_up_type: PowerUpType) -> None:
        self.log.info("Power-up collected: %s", power_up_type.value)
