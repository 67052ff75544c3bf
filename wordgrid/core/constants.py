"""Shared constants and enumerations for the word grid placer."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


EMPTY: Optional[str] = None
"""Sentinel stored in board cells that no word covers."""

DEFAULT_WIDTH = 12
DEFAULT_HEIGHT = 12


class Direction(str, Enum):
    """The eight straight-line directions a word may run in."""

    NORTH = "NORTH"
    SOUTH = "SOUTH"
    EAST = "EAST"
    WEST = "WEST"
    NORTH_EAST = "NORTH_EAST"
    NORTH_WEST = "NORTH_WEST"
    SOUTH_EAST = "SOUTH_EAST"
    SOUTH_WEST = "SOUTH_WEST"

    @property
    def step(self) -> Tuple[int, int]:
        return DIRECTION_STEPS[self]

    def scale(self, n: int) -> Tuple[int, int]:
        dx, dy = DIRECTION_STEPS[self]
        return dx * n, dy * n


DIRECTION_STEPS: Dict[Direction, Tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.SOUTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
    Direction.NORTH_EAST: (1, 1),
    Direction.NORTH_WEST: (-1, 1),
    Direction.SOUTH_EAST: (1, -1),
    Direction.SOUTH_WEST: (-1, -1),
}

ALL_DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


def scale(direction: Direction, n: int) -> Tuple[int, int]:
    """Return the displacement of ``n`` steps along ``direction``."""

    return direction.scale(n)
