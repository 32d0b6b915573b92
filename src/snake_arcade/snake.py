"""Snake body representation."""

from __future__ import annotations

from collections import deque

from snake_arcade.grid import Direction, GridPosition


class Snake:
    """A snake represented as an ordered deque of grid segments.

    The head is ``body[0]``; the tail is ``body[-1]``. The engine decides
    whether a move grows the snake by choosing to call :meth:`remove_tail`.
    """

    def __init__(
        self,
        start: GridPosition,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self.body: deque[GridPosition] = deque(
            GridPosition(start.x - dx * i, start.y - dy * i)
            for i in range(length)
        )
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> GridPosition:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> GridPosition:
        return self.body[-1]

    def move(self, direction: Direction) -> GridPosition:
        """Insert a new head one cell along *direction* and return it."""
        return self.move_to(self.head.moved(direction))

    def move_to(self, position: GridPosition) -> GridPosition:
        """Insert *position* as the new head (used for wrapped moves)."""
        self.body.appendleft(position)
        return position

    def remove_tail(self) -> GridPosition:
        """Drop the last segment and return it."""
        if len(self.body) <= 1:
            raise ValueError("Cannot shrink a snake below length 1.")
        return self.body.pop()

    def contains(self, position: GridPosition) -> bool:
        """Check whether any segment occupies *position*."""
        return position in self.body

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg) for seg in self.body],
            "direction": self.direction.name.lower(),
        }
