"""Headless fixed-timestep driver for :class:`GameEngine`."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from snake_arcade.engine import GameEngine, GameState

if TYPE_CHECKING:
    from snake_arcade.grid import GridPosition
    from snake_arcade.items import PowerUpType

logger = logging.getLogger(__name__)


class FixedStepRunner:
    """Accumulator loop: per-frame updates, one move per elapsed interval.

    The runner observes the engine so it can clear the accumulator
    whenever a new game returns to READY.
    """

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine
        self.accumulated = 0.0
        self.frames = 0
        self.moves = 0
        engine.add_observer(self)

    def advance(self, delta: float) -> bool | None:
        """Run one frame of *delta* seconds.

        Returns the result of ``move_snake`` if a move happened this
        frame, otherwise ``None``.
        """
        if delta < 0:
            raise ValueError("delta must be >= 0.")
        self.frames += 1
        self.engine.update(delta)
        if self.engine.state is not GameState.PLAYING:
            return None

        self.accumulated += delta
        interval = self.engine.move_interval
        if self.accumulated < interval:
            return None
        self.accumulated -= interval
        self.moves += 1
        return self.engine.move_snake()

    def run(
        self,
        duration: float,
        frame_delta: float = 1 / 60,
        before_move: Callable[[GameEngine], None] | None = None,
    ) -> int:
        """Drive frames until *duration* elapses or the game leaves PLAYING.

        *before_move* is called each frame before the engine advances, the
        natural place for an input source to steer. Returns the number of
        frames run.
        """
        if frame_delta <= 0:
            raise ValueError("frame_delta must be positive.")
        frames = 0
        elapsed = 0.0
        while elapsed < duration and self.engine.state is GameState.PLAYING:
            if before_move is not None:
                before_move(self.engine)
            self.advance(frame_delta)
            elapsed += frame_delta
            frames += 1
        logger.debug(
            "Ran %d frames (%.2fs), %d moves total.", frames, elapsed, self.moves,
        )
        return frames

    # Observer callbacks; only state changes matter to the loop.

    def on_game_state_changed(self, state: GameState) -> None:
        if state is GameState.READY:
            self.accumulated = 0.0

    def on_score_changed(self, score: int) -> None:
        pass

    def on_food_eaten(self, position: GridPosition, value: int) -> None:
        pass

    def on_power_up_collected(self, power_up_type: PowerUpType) -> None:
        pass
