"""Letter-consistency check for a single candidate placement."""

from __future__ import annotations

from typing import Optional

from ..core.constants import EMPTY
from ..core.models import PlacedWord
from .board import Board


def check_collision(placement: PlacedWord, board: Board) -> Optional[Board]:
    """Overlay ``placement`` on a copy of ``board``.

    Returns the new board when every letter agrees with the cells it covers,
    or ``None`` at the first disagreement. ``board`` itself is never modified;
    tentative writes live only on the discarded copy.
    """

    overlay = board.clone()
    for position, letter in placement.letters():
        existing = overlay.cell(position)
        if existing is EMPTY:
            overlay.set_cell(position, letter)
        elif existing != letter:
            return None
    return overlay
