"""High-score storage collaborators."""

from __future__ import annotations

from typing import Protocol


class HighScoreStore(Protocol):
    """Loads and saves the best score across sessions."""

    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class InMemoryHighScoreStore:
    """Keeps the high score for the lifetime of the process."""

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError("initial high score must be >= 0.")
        self.score = initial
        self.saves = 0

    def load(self) -> int:
        return self.score

    def save(self, score: int) -> None:
        self.score = score
        self.saves += 1
