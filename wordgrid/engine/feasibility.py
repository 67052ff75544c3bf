"""Exhaustive CP-SAT feasibility check using OR-Tools.

The backtracking solver explores one randomized order. This module decides the
same placement problem independently of any order, which confirms that a
``None`` from the solver means no arrangement exists at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import ALL_DIRECTIONS
from ..core.models import PlacedWord, Position
from ..utils.logger import get_logger
from .board import Board, BoardConfig
from .solver import Solution, validate_words

LOGGER = get_logger(__name__)


class FeasibilityStatus(str, Enum):
    FEASIBLE = "FEASIBLE"
    INFEASIBLE = "INFEASIBLE"
    UNKNOWN = "UNKNOWN"


@dataclass
class FeasibilityConfig:
    timeout: float = 30.0
    num_workers: int = 4


@dataclass
class FeasibilityResult:
    status: FeasibilityStatus
    solution: Optional[Solution] = None
    wall_time: float = 0.0

    @property
    def feasible(self) -> bool:
        return self.status == FeasibilityStatus.FEASIBLE


def check_feasibility(
    words: Sequence[str],
    width: int,
    height: int,
    config: Optional[FeasibilityConfig] = None,
) -> FeasibilityResult:
    """Decide whether every word fits on the board simultaneously.

    Args:
        words: Words to place; validated like the backtracking solver input.
        width: Board width in cells.
        height: Board height in cells.
        config: Solver time limit and worker count.

    Returns:
        A result whose ``solution`` holds one arrangement when feasible.
    """
    config = config or FeasibilityConfig()
    words = validate_words(words)
    board = Board(BoardConfig(width=width, height=height))
    if not words:
        return FeasibilityResult(FeasibilityStatus.FEASIBLE, Solution(board=board, placed_words=[]))

    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: Candidate placement literals, exactly one per word
    # ------------------------------------------------------------------
    candidates: List[List[Tuple[PlacedWord, cp_model.IntVar]]] = []
    for index, word in enumerate(words):
        options: List[Tuple[PlacedWord, cp_model.IntVar]] = []
        for x in range(width):
            for y in range(height):
                for direction in ALL_DIRECTIONS:
                    start = Position(x, y)
                    if not board.span_in_bounds(start, direction, len(word)):
                        continue
                    literal = model.new_bool_var(f"P_{index}_{x}_{y}_{direction.value}")
                    options.append((PlacedWord(word=word, start=start, direction=direction), literal))
        if not options:
            LOGGER.debug("Word #%d %r has no in-bounds span", index, word)
            return FeasibilityResult(FeasibilityStatus.INFEASIBLE)
        model.add_exactly_one([literal for _, literal in options])
        candidates.append(options)

    # ------------------------------------------------------------------
    # Step 2: Cell letter variables; 0 means uncovered
    # ------------------------------------------------------------------
    alphabet = sorted({letter for word in words for letter in word})
    codes = {letter: code for code, letter in enumerate(alphabet, start=1)}
    cell_vars: Dict[Position, cp_model.IntVar] = {}

    for options in candidates:
        for placement, literal in options:
            for position, letter in placement.letters():
                if position not in cell_vars:
                    cell_vars[position] = model.new_int_var(
                        0, len(alphabet), f"L_{position.x}_{position.y}"
                    )
                model.add(cell_vars[position] == codes[letter]).only_enforce_if(literal)

    # ------------------------------------------------------------------
    # Step 3: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = config.timeout
    solver.parameters.num_workers = config.num_workers

    LOGGER.info(
        "CP-SAT: %d words, %d placement literals, %d cell vars, solving (timeout=%0.1fs)...",
        len(words),
        sum(len(options) for options in candidates),
        len(cell_vars),
        config.timeout,
    )
    status = solver.solve(model)

    if status == cp_model.INFEASIBLE:
        LOGGER.info("CP-SAT: proven infeasible in %.2fs", solver.wall_time)
        return FeasibilityResult(FeasibilityStatus.INFEASIBLE, wall_time=solver.wall_time)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: undecided (status=%s)", solver.status_name(status))
        return FeasibilityResult(FeasibilityStatus.UNKNOWN, wall_time=solver.wall_time)

    LOGGER.info("CP-SAT: arrangement found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 4: Extract solution
    # ------------------------------------------------------------------
    placed: List[PlacedWord] = []
    for options in candidates:
        chosen = next(placement for placement, literal in options if solver.value(literal))
        placed.append(chosen)
        for position, letter in chosen.letters():
            board.set_cell(position, letter)
    return FeasibilityResult(
        FeasibilityStatus.FEASIBLE,
        Solution(board=board, placed_words=placed),
        wall_time=solver.wall_time,
    )
