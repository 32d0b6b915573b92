"""Snake Arcade: deterministic snake engine with timed power-ups."""

from snake_arcade.config import GameConfig
from snake_arcade.effects import EffectRegistry
from snake_arcade.engine import GameEngine, GameState
from snake_arcade.events import EventDispatcher, GameEventObserver, LoggingObserver
from snake_arcade.grid import CellType, Direction, Grid, GridPosition
from snake_arcade.highscore import HighScoreStore, InMemoryHighScoreStore
from snake_arcade.items import Food, PowerUp, PowerUpType
from snake_arcade.loop import FixedStepRunner
from snake_arcade.snake import Snake

__all__ = [
    "CellType",
    "Direction",
    "EffectRegistry",
    "EventDispatcher",
    "FixedStepRunner",
    "Food",
    "GameConfig",
    "GameEngine",
    "GameEventObserver",
    "GameState",
    "Grid",
    "GridPosition",
    "HighScoreStore",
    "InMemoryHighScoreStore",
    "LoggingObserver",
    "PowerUp",
    "PowerUpType",
    "Snake",
]
