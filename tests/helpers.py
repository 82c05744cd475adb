from __future__ import annotations

from typing import Iterable, Sequence

from ecs.components.board import Board
from ecs.components.puzzle_state import PuzzleState


def make_puzzle(
    side: int = 4,
    start: tuple[int, int] = (0, 0),
    painted: Iterable[tuple[int, int]] = (),
    faces: Sequence[bool] | None = None,
) -> PuzzleState:
    """Build a puzzle with the given painted squares and cube faces."""

    board = Board.with_painted(side, painted)
    return PuzzleState(side, start[0], start[1], board, faces)


def roll_path(state: PuzzleState, path: Iterable[tuple[int, int]]) -> None:
    """Roll the cube through each square of PATH in turn."""

    for row, col in path:
        state.move(row, col)


def record_changes(state: PuzzleState) -> list[PuzzleState]:
    """Register a listener on STATE and return the list it appends senders to."""

    seen: list[PuzzleState] = []

    def listener(sender, **kwargs):
        seen.append(sender)

    state.add_listener(listener)
    return seen
