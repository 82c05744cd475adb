from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Tuple

from ecs.components.board import Board
from ecs.constants import MIN_SIDE, PAINTED_SQUARE_COUNT

Position = Tuple[int, int]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PuzzleLayout:
    """Starting configuration for a new puzzle."""
    side: int
    start: Position
    painted: List[Position]

    def build_board(self) -> Board:
        return Board.with_painted(self.side, self.painted)


def random_puzzle_layout(
    side: int,
    rng: random.Random,
    *,
    painted_count: int = PAINTED_SQUARE_COUNT,
) -> PuzzleLayout:
    """Pick a random start square and PAINTED_COUNT distinct painted squares.

    Squares are drawn without replacement, so the painted set always has
    exactly PAINTED_COUNT members. The start square may be one of them.
    """
    if side < MIN_SIDE:
        raise ValueError(f"Board side must be at least {MIN_SIDE}, got {side}")
    if not 0 <= painted_count <= side * side:
        raise ValueError(f"Cannot paint {painted_count} squares on a {side}x{side} board")
    start = (rng.randrange(side), rng.randrange(side))
    cells = rng.sample(range(side * side), painted_count)
    painted = sorted(divmod(cell, side) for cell in cells)
    logger.debug("Generated %dx%d layout: start=%s painted=%s", side, side, start, painted)
    return PuzzleLayout(side=side, start=start, painted=painted)
