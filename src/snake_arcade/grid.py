"""Grid coordinates, movement directions, and board geometry."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

if TYPE_CHECKING:
    from snake_arcade.items import Food, PowerUp
    from snake_arcade.snake import Snake


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    The y axis grows upward, so ``UP`` increments y.
    """

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the direction pointing the other way."""
        return _OPPOSITES[self]

    @property
    def vector(self) -> tuple[int, int]:
        """Unit vector for presentation layers."""
        return self.value


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class GridPosition(NamedTuple):
    """An immutable (x, y) cell coordinate."""

    x: int
    y: int

    def moved(self, direction: Direction) -> GridPosition:
        """Return the neighbouring cell along *direction* (unbounded)."""
        dx, dy = direction.value
        return GridPosition(self.x + dx, self.y + dy)


class CellType(enum.IntEnum):
    """Integer codes stored in an occupancy array."""

    EMPTY = 0
    SNAKE = 1
    HEAD = 2
    FOOD = 3
    POWER_UP = 4


class Grid:
    """Board geometry: bounds, wrapping, and occupancy snapshots.

    Entities live on the engine; the grid only answers geometric questions
    and paints a NumPy view of the board on demand. Array rows are indexed
    by y and columns by x.
    """

    def __init__(self, width: int = 20, height: int = 30) -> None:
        if width < 1 or height < 1:
            raise ValueError("Grid dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def center(self) -> GridPosition:
        return GridPosition(self.width // 2, self.height // 2)

    def in_bounds(self, position: GridPosition) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def wrap(self, position: GridPosition) -> GridPosition:
        """Wrap coordinates around the grid edges."""
        return GridPosition(position.x % self.width, position.y % self.height)

    def occupancy(
        self,
        snake: Snake,
        food: Food | None = None,
        power_ups: Iterable[PowerUp] = (),
    ) -> np.ndarray:
        """Paint the entities onto a fresh ``(height, width)`` int8 array."""
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for power_up in power_ups:
            cells[power_up.position.y, power_up.position.x] = CellType.POWER_UP
        if food is not None:
            cells[food.position.y, food.position.x] = CellType.FOOD
        for seg in snake.body:
            if self.in_bounds(seg):
                cells[seg.y, seg.x] = CellType.SNAKE
        head = snake.head
        if self.in_bounds(head):
            cells[head.y, head.x] = CellType.HEAD
        return cells

    def to_dict(self) -> dict:
        """Serialize grid dimensions to a dictionary."""
        return {"width": self.width, "height": self.height}
