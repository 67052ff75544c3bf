"""Board representation and helper utilities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from ..core.constants import EMPTY, Direction
from ..core.exceptions import InvalidDimensionsError, OutOfBoundsError
from ..core.models import PlacedWord, Position


Cells = List[List[Optional[str]]]
Undo = Callable[[], None]


@dataclass
class BoardConfig:
    """Dimensions of the grid words are placed on."""

    width: int
    height: int

    def validate(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensionsError(f"Board {name} must be a positive integer, got {value!r}")


class Board:
    """Fixed-size grid whose cells hold either ``EMPTY`` or one character.

    Cells are stored row-major, ``cells[y][x]``.
    """

    def __init__(self, config: BoardConfig, cells: Optional[Cells] = None) -> None:
        config.validate()
        self.config = config
        self.width = config.width
        self.height = config.height
        if cells is None:
            cells = [[EMPTY for _ in range(self.width)] for _ in range(self.height)]
        self.cells: Cells = cells

    @classmethod
    def create(cls, width: int, height: int) -> Board:
        return cls(BoardConfig(width=width, height=height))

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------
    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def span_in_bounds(self, start: Position, direction: Direction, length: int) -> bool:
        """Check a straight word span by its two endpoints.

        Every direction moves monotonically on both axes, so the cells between
        two in-bounds endpoints are in bounds too.
        """

        if length <= 0:
            return False
        return self.in_bounds(start) and self.in_bounds(start.translate(direction, length - 1))

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def cell(self, position: Position) -> Optional[str]:
        if not self.in_bounds(position):
            raise OutOfBoundsError(f"Cell outside board: {(position.x, position.y)}")
        return self.cells[position.y][position.x]

    def set_cell(self, position: Position, letter: Optional[str]) -> None:
        if not self.in_bounds(position):
            raise OutOfBoundsError(f"Cell outside board: {(position.x, position.y)}")
        self.cells[position.y][position.x] = letter

    def is_empty(self, position: Position) -> bool:
        return self.cell(position) is EMPTY

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def clone(self) -> Board:
        return Board(BoardConfig(self.width, self.height), [list(row) for row in self.cells])

    def place_undoable(self, placement: PlacedWord) -> Optional[Undo]:
        """Overlay ``placement`` in place and return an undo callable.

        Returns ``None`` on the first letter conflict, after reverting the
        cells already written by this call.
        """

        written: List[Position] = []
        for position, letter in placement.letters():
            existing = self.cell(position)
            if existing is EMPTY:
                self.cells[position.y][position.x] = letter
                written.append(position)
            elif existing != letter:
                for pos in written:
                    self.cells[pos.y][pos.x] = EMPTY
                return None

        def undo() -> None:
            for pos in written:
                self.cells[pos.y][pos.x] = EMPTY

        return undo

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def filled_count(self) -> int:
        return sum(1 for row in self.cells for letter in row if letter is not EMPTY)

    @property
    def filled_ratio(self) -> float:
        return self.filled_count / (self.width * self.height)

    def rows(self) -> List[Tuple[Optional[str], ...]]:
        """Rows from the top of the board (highest ``y``) down."""

        return [tuple(row) for row in reversed(self.cells)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.width == other.width and self.height == other.height and self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, filled={self.filled_count})"

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def to_jsonable(self) -> List[List[Optional[str]]]:
        return [list(row) for row in self.rows()]
