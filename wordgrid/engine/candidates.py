"""Randomized candidate ordering for word placement."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Tuple

from ..core.constants import ALL_DIRECTIONS, Direction

Candidate = Tuple[int, int, Direction]


class CandidateEnumerator:
    """Produces shuffled (x, y, direction) triples for one word.

    Columns are the outer level, rows the middle level and directions the
    inner level. Each level is shuffled independently every time it is
    entered, using the injected generator.
    """

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

    @property
    def branching_factor(self) -> int:
        return self.width * self.height * len(ALL_DIRECTIONS)

    def order(self) -> Iterator[Candidate]:
        xs = list(range(self.width))
        self.rng.shuffle(xs)
        for x in xs:
            ys = list(range(self.height))
            self.rng.shuffle(ys)
            for y in ys:
                directions = list(ALL_DIRECTIONS)
                self.rng.shuffle(directions)
                for direction in directions:
                    yield x, y, direction
