"""Randomized backtracking search placing every word on the board.

The search is depth-first over the word list in input order. For each word the
candidate (x, y, direction) triples come from :class:`CandidateEnumerator`;
out-of-bounds spans are skipped, the rest go through the collision check. A
failed subtree rolls back both the placement list and the board before the
next candidate is tried. The first complete arrangement wins.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence

from ..core.exceptions import EmptyWordError, InvalidInputError, NoSolutionFoundError
from ..core.models import PlacedWord, Position
from ..utils.logger import get_logger
from .board import Board, BoardConfig, Undo
from .candidates import Candidate, CandidateEnumerator
from .collision import check_collision


LOGGER = get_logger(__name__)


class RollbackStrategy(str, Enum):
    """How a failed subtree restores the board."""

    CLONE = "clone"
    UNDO_LOG = "undo_log"


@dataclass
class SolverConfig:
    width: int
    height: int
    seed: Optional[int] = None
    rollback: RollbackStrategy = RollbackStrategy.CLONE

    def to_board_config(self) -> BoardConfig:
        return BoardConfig(width=self.width, height=self.height)


@dataclass
class SearchStats:
    candidates_tried: int = 0
    out_of_bounds: int = 0
    conflicts: int = 0
    placements: int = 0
    backtracks: int = 0
    max_depth: int = 0

    def to_jsonable(self) -> dict:
        return dict(self.__dict__)


@dataclass
class Solution:
    board: Board
    placed_words: List[PlacedWord]
    stats: SearchStats = field(default_factory=SearchStats)
    seed: Optional[int] = None

    def to_jsonable(self) -> dict:
        return {
            "width": self.board.width,
            "height": self.board.height,
            "seed": self.seed,
            "board": self.board.to_jsonable(),
            "placed_words": [placement.to_jsonable() for placement in self.placed_words],
            "stats": self.stats.to_jsonable(),
        }


@dataclass
class _Frame:
    """Search state for one word index."""

    index: int
    board: Board
    candidates: Iterator[Candidate]
    placed: bool = False
    undo: Optional[Undo] = None


def validate_words(words: Sequence[str]) -> List[str]:
    """Reject anything the search cannot place, before it starts."""

    if isinstance(words, str):
        raise InvalidInputError("Expected a sequence of words, got a single string")
    validated: List[str] = []
    for index, word in enumerate(words):
        if not isinstance(word, str):
            raise InvalidInputError(f"Word #{index} is not a string: {word!r}")
        if not word:
            raise EmptyWordError(f"Word #{index} is empty")
        validated.append(word)
    return validated


class BacktrackingSolver:
    """Depth-first placement search driven by an explicit frame stack."""

    def __init__(self, config: SolverConfig, rng: Optional[random.Random] = None) -> None:
        config.to_board_config().validate()
        self.config = config
        self.rng = rng or random.Random(config.seed)
        self.enumerator = CandidateEnumerator(config.width, config.height, self.rng)
        self.last_stats: Optional[SearchStats] = None

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def solve(self, words: Sequence[str]) -> Optional[Solution]:
        """Place ``words`` in order; return ``None`` when no arrangement exists."""

        words = validate_words(words)
        stats = SearchStats()
        self.last_stats = stats
        board = Board(self.config.to_board_config())
        LOGGER.info(
            "Placing %d words on a %dx%d board (rollback=%s)",
            len(words),
            board.width,
            board.height,
            self.config.rollback.value,
        )
        if not words:
            return Solution(board=board, placed_words=[], stats=stats, seed=self.config.seed)

        placements: List[PlacedWord] = []
        stack: List[_Frame] = [self._new_frame(0, board)]
        while stack:
            frame = stack[-1]
            if frame.placed:
                self._rollback(frame, placements, stats)

            next_board = self._advance(frame, words[frame.index], placements, stats)
            if next_board is None:
                stack.pop()
                continue

            depth = frame.index + 1
            stats.max_depth = max(stats.max_depth, depth)
            if depth == len(words):
                if self.config.rollback == RollbackStrategy.UNDO_LOG:
                    next_board = next_board.clone()
                LOGGER.info(
                    "Placed %d words after %d candidates (%d conflicts, %d backtracks)",
                    len(placements),
                    stats.candidates_tried,
                    stats.conflicts,
                    stats.backtracks,
                )
                return Solution(
                    board=next_board,
                    placed_words=list(placements),
                    stats=stats,
                    seed=self.config.seed,
                )
            stack.append(self._new_frame(depth, next_board))

        LOGGER.warning(
            "No arrangement found for %d words on a %dx%d board (%d candidates tried)",
            len(words),
            self.config.width,
            self.config.height,
            stats.candidates_tried,
        )
        return None

    def solve_or_raise(self, words: Sequence[str]) -> Solution:
        solution = self.solve(words)
        if solution is None:
            raise NoSolutionFoundError(
                f"Unable to place {len(words)} words on a "
                f"{self.config.width}x{self.config.height} board"
            )
        return solution

    # ------------------------------------------------------------------
    # Search steps
    # ------------------------------------------------------------------
    def _new_frame(self, index: int, board: Board) -> _Frame:
        return _Frame(index=index, board=board, candidates=self.enumerator.order())

    def _advance(
        self,
        frame: _Frame,
        word: str,
        placements: List[PlacedWord],
        stats: SearchStats,
    ) -> Optional[Board]:
        """Commit the next consistent candidate of ``frame``; return the board to descend with."""

        for x, y, direction in frame.candidates:
            stats.candidates_tried += 1
            start = Position(x, y)
            if not frame.board.span_in_bounds(start, direction, len(word)):
                stats.out_of_bounds += 1
                continue

            placement = PlacedWord(word=word, start=start, direction=direction)
            if self.config.rollback == RollbackStrategy.UNDO_LOG:
                undo = frame.board.place_undoable(placement)
                if undo is None:
                    stats.conflicts += 1
                    continue
                frame.undo = undo
                next_board = frame.board
            else:
                overlay = check_collision(placement, frame.board)
                if overlay is None:
                    stats.conflicts += 1
                    continue
                next_board = overlay

            placements.append(placement)
            frame.placed = True
            stats.placements += 1
            return next_board
        return None

    @staticmethod
    def _rollback(frame: _Frame, placements: List[PlacedWord], stats: SearchStats) -> None:
        """Undo the placement whose subtree just failed."""

        removed = placements.pop()
        if frame.undo is not None:
            frame.undo()
            frame.undo = None
        frame.placed = False
        stats.backtracks += 1
        LOGGER.debug(
            "Backtracking word #%d %r from (%d,%d) %s",
            frame.index,
            removed.word,
            removed.start.x,
            removed.start.y,
            removed.direction.value,
        )


def place_words(
    words: Sequence[str],
    width: int,
    height: int,
    rng: Optional[random.Random] = None,
) -> Optional[Solution]:
    """Place ``words`` on a ``width`` x ``height`` board, or return ``None``."""

    return BacktrackingSolver(SolverConfig(width=width, height=height), rng=rng).solve(words)
