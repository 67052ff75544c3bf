"""Randomized backtracking placement of words on a fixed-size letter grid.

This package exposes the public API surface via:

- ``wordgrid.engine.solver.BacktrackingSolver``: places an ordered word list.
- ``wordgrid.engine.solver.place_words``: one-call entry point.
- ``wordgrid.engine.feasibility.check_feasibility``: exhaustive CP-SAT check.
- ``wordgrid.data.numbers.encode``: English number spelling for word lists.
"""

from .engine.board import Board, BoardConfig
from .engine.solver import BacktrackingSolver, RollbackStrategy, Solution, SolverConfig, place_words

__all__ = [
    "BacktrackingSolver",
    "Board",
    "BoardConfig",
    "RollbackStrategy",
    "Solution",
    "SolverConfig",
    "place_words",
]

__version__ = "0.1.0"
