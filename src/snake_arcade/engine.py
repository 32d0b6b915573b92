"""Fixed-step game engine composing snake, items, effects, and events."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_arcade.config import GameConfig
from snake_arcade.effects import EffectRegistry
from snake_arcade.events import EventDispatcher, GameEventObserver
from snake_arcade.grid import Direction, Grid, GridPosition
from snake_arcade.highscore import HighScoreStore, InMemoryHighScoreStore
from snake_arcade.items import Food, PowerUp, PowerUpType
from snake_arcade.snake import Snake
from snake_arcade.spawner import ItemSpawner

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    """Lifecycle of a single game session."""

    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class GameEngine:
    """Single-snake engine driven by an external fixed-timestep loop.

    The driver calls :meth:`update` once per frame and :meth:`move_snake`
    each time its accumulator reaches :attr:`move_interval`. ``update``
    must run first within a frame so that expired effects no longer
    count when the move resolves collisions and scoring.

    Illegal requests are ignored rather than raised: direction reversals,
    input outside PLAYING, and moves outside PLAYING are no-ops.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        store: HighScoreStore | None = None,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config or GameConfig()
        self.store = store if store is not None else InMemoryHighScoreStore()
        self.grid = Grid(self.config.grid_width, self.config.grid_height)
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.spawner = ItemSpawner(self.grid, self.config, rng=self.rng)
        self.effects = EffectRegistry(self.config)
        self._events = EventDispatcher()

        self._high_score = self.store.load()
        self._reset_board()
        self._state = GameState.READY

    # ------------------------------------------------------------------
    # Read-only snapshots
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def snake(self) -> Snake:
        return self._snake

    @property
    def food(self) -> Food | None:
        return self._food

    @property
    def power_ups(self) -> tuple[PowerUp, ...]:
        return tuple(self._power_ups)

    @property
    def active_effects(self) -> dict[PowerUpType, float]:
        return self.effects.active

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def combo(self) -> int:
        return self._combo

    @property
    def move_interval(self) -> float:
        return self.effects.move_interval

    @property
    def base_interval(self) -> float:
        return self.effects.base_interval

    @property
    def pending_direction(self) -> Direction:
        """Direction the next move will take."""
        if self._pending_direction is not None:
            return self._pending_direction
        return self._snake.direction

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_observer(self, observer: GameEventObserver) -> None:
        self._events.add(observer)

    def remove_observer(self, observer: GameEventObserver) -> bool:
        return self._events.remove(observer)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_new_game(self) -> None:
        """Reset the session to READY, keeping the high score."""
        self._record_high_score()
        self._reset_board()
        self._state = GameState.READY
        logger.info("New game ready (high score %d).", self._high_score)
        self._events.game_state_changed(self._state)
        self._events.score_changed(self._score)

    def start_playing(self) -> None:
        if self._state is not GameState.READY:
            return
        self._set_state(GameState.PLAYING)

    def pause(self) -> None:
        if self._state is not GameState.PLAYING:
            return
        self._set_state(GameState.PAUSED)

    def resume(self) -> None:
        if self._state is not GameState.PAUSED:
            return
        self._set_state(GameState.PLAYING)

    def change_direction(self, direction: Direction) -> None:
        """Buffer a heading for the next move, ignoring 180° reversals."""
        if self._state is not GameState.PLAYING:
            return
        if direction is self._snake.direction.opposite():
            return
        self._pending_direction = direction

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def update(self, delta: float) -> None:
        """Per-frame upkeep: expire effects and uncollected power-ups."""
        if self._state is not GameState.PLAYING:
            return
        self.effects.tick(delta)
        for power_up in self._power_ups:
            power_up.update(delta)
        expired = [p for p in self._power_ups if p.is_expired]
        if expired:
            self._power_ups = [p for p in self._power_ups if not p.is_expired]
            logger.debug("%d power-up(s) expired uncollected.", len(expired))

    def move_snake(self) -> bool:
        """Advance the snake one cell.

        Returns False if the move was fatal (the engine is then in
        GAME_OVER) or if the game is not being played.
        """
        if self._state is not GameState.PLAYING:
            return False

        if self._pending_direction is not None:
            self._snake.direction = self._pending_direction
            self._pending_direction = None

        shielded = self.effects.is_active(PowerUpType.SHIELD)
        new_head = self._snake.head.moved(self._snake.direction)

        # --- boundary check ---
        if not self.grid.in_bounds(new_head):
            if not shielded:
                self._end_game("wall")
                return False
            new_head = self.grid.wrap(new_head)

        # --- self-collision check (tail included) ---
        if not shielded and self._snake.contains(new_head):
            self._end_game("self")
            return False

        self._snake.move_to(new_head)

        if self._food is not None and new_head == self._food.position:
            self._eat_food(self._food)
            return True

        for index, power_up in enumerate(self._power_ups):
            if power_up.position == new_head:
                # Tail stays: collecting a power-up also grows the snake.
                del self._power_ups[index]
                self._collect_power_up(power_up)
                return True

        self._snake.remove_tail()
        return True

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "state": self._state.value,
            "score": self._score,
            "high_score": self._high_score,
            "combo": self._combo,
            "move_interval": self.effects.move_interval,
            "grid": self.grid.to_dict(),
            "snake": self._snake.to_dict(),
            "food": self._food.to_dict() if self._food is not None else None,
            "power_ups": [p.to_dict() for p in self._power_ups],
            "active_effects": {
                t.value: left for t, left in self.effects.active.items()
            },
            "board": self.board().tolist(),
        }

    def board(self) -> np.ndarray:
        """Occupancy array of the current board (rows indexed by y)."""
        return self.grid.occupancy(self._snake, self._food, self._power_ups)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _reset_board(self) -> None:
        self._score = 0
        self._combo = 0
        self._pending_direction: Direction | None = None
        self.effects.reset()
        self.spawner.reset()
        self._power_ups: list[PowerUp] = []
        self._snake = Snake(
            self.grid.center, Direction.RIGHT,
            length=self.config.initial_snake_length,
        )
        self._food: Food | None = self.spawner.spawn_food(
            self._snake, self._power_ups,
        )

    def _set_state(self, state: GameState) -> None:
        self._state = state
        logger.info("Game state -> %s.", state.value)
        self._events.game_state_changed(state)

    def _eat_food(self, food: Food) -> None:
        self._combo += 1
        multiplier = 2 if self.effects.is_active(PowerUpType.DOUBLE_POINTS) else 1
        points = food.value * multiplier
        bonus = (
            min(self._combo - 1, self.config.max_combo_bonus_steps)
            * self.config.combo_bonus_step
        )
        self._score += points + bonus

        if not self.effects.is_active(PowerUpType.SLOW_MOTION):
            self.effects.accelerate()

        self._events.score_changed(self._score)
        self._events.food_eaten(food.position, points + bonus)

        self._food = self.spawner.spawn_food(self._snake, self._power_ups)
        if self.spawner.should_spawn_power_up():
            power_up = self.spawner.spawn_power_up(
                self._snake, self._food, self._power_ups,
            )
            if power_up is not None:
                self._power_ups.append(power_up)

    def _collect_power_up(self, power_up: PowerUp) -> None:
        self.effects.activate(power_up.type)
        logger.debug("Collected %s at %s.", power_up.type.value, power_up.position)
        self._events.power_up_collected(power_up.type)

    def _record_high_score(self) -> bool:
        if self._score <= self._high_score:
            return False
        self._high_score = self._score
        self.store.save(self._high_score)
        logger.info("New high score: %d.", self._high_score)
        return True

    def _end_game(self, cause: str) -> None:
        self._state = GameState.GAME_OVER
        self._combo = 0
        self._record_high_score()
        logger.info(
            "Snake died (%s) with score %d and length %d.",
            cause, self._score, len(self._snake),
        )
        self._events.game_state_changed(self._state)
