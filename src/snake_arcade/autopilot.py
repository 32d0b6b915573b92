"""Greedy steering for headless runs."""

from __future__ import annotations

from snake_arcade.engine import GameEngine
from snake_arcade.grid import Direction, GridPosition
from snake_arcade.items import PowerUpType


def manhattan(a: GridPosition, b: GridPosition) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


class GreedyPilot:
    """Steers toward the nearest collectible while avoiding fatal cells.

    Ties are broken by :class:`Direction` declaration order, so a run is
    fully determined by the engine's seed.
    """

    def __init__(self, collect_power_ups: bool = True) -> None:
        self.collect_power_ups = collect_power_ups

    def choose(self, engine: GameEngine) -> Direction:
        snake = engine.snake
        head = snake.head
        targets = [engine.food.position] if engine.food is not None else []
        if self.collect_power_ups:
            targets.extend(p.position for p in engine.power_ups)
        if not targets:
            targets = [engine.grid.center]
        target = min(targets, key=lambda p: manhattan(head, p))

        scored: list[tuple[int, Direction]] = []
        for direction in Direction:
            if direction is snake.direction.opposite():
                continue
            nxt = self._landing(engine, direction)
            if nxt is None:
                continue
            scored.append((manhattan(nxt, target), direction))

        if not scored:
            # Boxed in; keep heading.
            return snake.direction
        return min(scored, key=lambda s: s[0])[1]

    def steer(self, engine: GameEngine) -> None:
        """Buffer the chosen direction on *engine*."""
        engine.change_direction(self.choose(engine))

    @staticmethod
    def _landing(engine: GameEngine, direction: Direction) -> GridPosition | None:
        """Cell the head would reach, or ``None`` if the move is fatal."""
        shielded = engine.effects.is_active(PowerUpType.SHIELD)
        nxt = engine.snake.head.moved(direction)
        if not engine.grid.in_bounds(nxt):
            if not shielded:
                return None
            nxt = engine.grid.wrap(nxt)
        if not shielded and engine.snake.contains(nxt):
            return None
        return nxt
