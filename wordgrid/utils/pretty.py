"""Pretty-print helpers for word grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import EMPTY

if TYPE_CHECKING:
    from ..engine.board import Board
    from ..engine.solver import Solution


DEFAULT_BLANK = "."


def cell_symbol(letter: Optional[str], blank: str = DEFAULT_BLANK) -> str:
    if letter is EMPTY:
        return blank
    return letter


def format_board(board: Board, blank: str = DEFAULT_BLANK) -> str:
    """Render the board with the highest row first, as ``y`` grows northwards."""

    width = board.width
    header_cells = [f"{x:>2}" for x in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for offset, row in enumerate(board.rows()):
        y = board.height - 1 - offset
        row_render = " ".join(f"{cell_symbol(letter, blank):>2}" for letter in row)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def format_placements(solution: Solution) -> str:
    width = max((len(placement.word) for placement in solution.placed_words), default=0)
    return "\n".join(
        f"  {placement.word:<{width}}  ({placement.start.x},{placement.start.y}) {placement.direction.value}"
        for placement in solution.placed_words
    )


def pretty_print_board(board: Board, *, label: str | None = None, blank: str = DEFAULT_BLANK, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board, blank), file=stream)


def print_solution_stats(solution: Solution, *, blank: str = DEFAULT_BLANK, stream=None) -> None:
    """Print board + placements + search stats for a completed solution."""

    stream = stream or sys.stdout
    board = solution.board
    print(format_board(board, blank), file=stream)

    total_cells = board.width * board.height
    print(file=stream)
    print("--- Board ---", file=stream)
    print(f"  Size:          {board.width} x {board.height} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {board.filled_count} ({board.filled_ratio * 100:.0f}%)", file=stream)

    placements = solution.placed_words
    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(placements)}", file=stream)
    if placements:
        directions = Counter(placement.direction.value for placement in placements)
        dist_parts = [f"{name}:{count}" for name, count in sorted(directions.items())]
        print(f"  Directions:    {' '.join(dist_parts)}", file=stream)
        print(format_placements(solution), file=stream)

    stats = solution.stats
    print(file=stream)
    print("--- Search ---", file=stream)
    print(f"  Candidates:    {stats.candidates_tried}", file=stream)
    print(f"  Out of bounds: {stats.out_of_bounds}", file=stream)
    print(f"  Conflicts:     {stats.conflicts}", file=stream)
    print(f"  Backtracks:    {stats.backtracks}", file=stream)

    if solution.seed is not None:
        print(file=stream)
        print(f"Seed: {solution.seed}", file=stream)
