"""Data models supporting the word grid placer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .constants import Direction


@dataclass(frozen=True)
class Position:
    """Integer cell coordinate; ``x`` is the column and ``y`` the row."""

    x: int
    y: int

    def translate(self, direction: Direction, distance: int = 1) -> Position:
        dx, dy = direction.scale(distance)
        return Position(self.x + dx, self.y + dy)


def translate(position: Position, direction: Direction, distance: int) -> Position:
    return position.translate(direction, distance)


@dataclass(frozen=True)
class PlacedWord:
    """A word committed (or proposed) at a start cell and direction."""

    word: str
    start: Position
    direction: Direction

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> List[Position]:
        return [self.start.translate(self.direction, i) for i in range(len(self.word))]

    @property
    def end(self) -> Position:
        return self.start.translate(self.direction, len(self.word) - 1)

    def letters(self) -> Iterator[Tuple[Position, str]]:
        """Yield ``(position, letter)`` pairs along the word span."""

        for index, letter in enumerate(self.word):
            yield self.start.translate(self.direction, index), letter

    def to_jsonable(self) -> dict:
        return {
            "word": self.word,
            "start": [self.start.x, self.start.y],
            "direction": self.direction.value,
        }
