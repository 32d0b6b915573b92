"""Tests for the greedy autopilot."""

from snake_arcade.autopilot import GreedyPilot, manhattan
from snake_arcade.config import GameConfig
from snake_arcade.engine import GameEngine, GameState
from snake_arcade.grid import Direction, GridPosition
from snake_arcade.items import Food, PowerUp, PowerUpType
from snake_arcade.loop import FixedStepRunner
from snake_arcade.snake import Snake


def _engine(food: GridPosition) -> GameEngine:
    engine = GameEngine(GameConfig(power_up_spawn_chance=0.0), seed=0)
    engine._food = Food(food, "test")
    engine.start_playing()
    return engine


class TestGreedyPilot:
    def test_manhattan(self):
        assert manhattan(GridPosition(0, 0), GridPosition(3, -4)) == 7

    def test_heads_toward_food(self):
        engine = _engine(GridPosition(10, 25))
        assert GreedyPilot().choose(engine) is Direction.UP

    def test_never_reverses(self):
        engine = _engine(GridPosition(2, 15))
        assert GreedyPilot().choose(engine) is not Direction.LEFT

    def test_avoids_wall(self):
        engine = _engine(GridPosition(0, 0))
        engine._snake = Snake(GridPosition(19, 15))
        assert GreedyPilot().choose(engine) is Direction.DOWN

    def test_wraps_when_shielded(self):
        engine = _engine(GridPosition(0, 15))
        engine._snake = Snake(GridPosition(19, 15))
        engine.effects.activate(PowerUpType.SHIELD)
        assert GreedyPilot().choose(engine) is Direction.RIGHT

    def test_targets_nearer_power_up(self):
        engine = _engine(GridPosition(0, 0))
        engine._power_ups.append(
            PowerUp(GridPosition(10, 10), PowerUpType.DOUBLE_POINTS),
        )
        assert GreedyPilot().choose(engine) is Direction.DOWN
        assert GreedyPilot(collect_power_ups=False).choose(engine) is not Direction.UP

    def test_steer_buffers_direction(self):
        engine = _engine(GridPosition(10, 25))
        GreedyPilot().steer(engine)
        assert engine.pending_direction is Direction.UP

    def test_plays_a_game(self):
        engine = GameEngine(seed=7)
        engine.start_playing()
        runner = FixedStepRunner(engine)
        runner.run(20.0, before_move=GreedyPilot().steer)
        assert engine.score > 0 or engine.state is GameState.GAME_OVER
