"""Deterministic rule validation for placement solutions."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from ..core.constants import EMPTY
from ..core.exceptions import ValidationError
from ..core.models import Position
from ..utils.logger import get_logger
from .solver import Solution


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class SolutionValidator:
    """Checks bounds, letter consistency and completeness of a solution."""

    def validate(self, solution: Solution, words: Optional[Sequence[str]] = None) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_bounds(solution)
            self._check_consistency(solution)
            if words is not None:
                self._check_completeness(solution, words)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_bounds(self, solution: Solution) -> None:
        board = solution.board
        for placement in solution.placed_words:
            if not board.span_in_bounds(placement.start, placement.direction, placement.length):
                raise ValidationError(
                    f"Word '{placement.word}' at {(placement.start.x, placement.start.y)} "
                    f"{placement.direction.value} leaves the {board.width}x{board.height} board"
                )

    def _check_consistency(self, solution: Solution) -> None:
        board = solution.board
        covered: Dict[Position, str] = {}
        for placement in solution.placed_words:
            for position, letter in placement.letters():
                previous = covered.setdefault(position, letter)
                if previous != letter:
                    raise ValidationError(
                        f"Cell {(position.x, position.y)} claimed as '{previous}' and '{letter}'"
                    )
        for position, letter in covered.items():
            if board.cell(position) != letter:
                raise ValidationError(
                    f"Board holds {board.cell(position)!r} at {(position.x, position.y)}, expected '{letter}'"
                )
        for y in range(board.height):
            for x in range(board.width):
                position = Position(x, y)
                if position not in covered and board.cell(position) is not EMPTY:
                    raise ValidationError(f"Uncovered cell {(x, y)} holds {board.cell(position)!r}")

    def _check_completeness(self, solution: Solution, words: Sequence[str]) -> None:
        placed = [placement.word for placement in solution.placed_words]
        if Counter(placed) != Counter(words):
            raise ValidationError(f"Placed words {placed} do not match input {list(words)}")
        if placed != list(words):
            raise ValidationError("Placed words are not in input order")
