"""Rolling-cube puzzle state: board paint, cube orientation and move counter."""
from __future__ import annotations

from typing import Callable, List, Sequence, Tuple

from blinker import Signal

from ecs.components.board import Board
from ecs.constants import (
    DEFAULT_SIDE,
    FACE_BOTTOM,
    FACE_COUNT,
    MIN_SIDE,
    ROLL_PERMUTATIONS,
)

Listener = Callable[..., None]


class InvalidMove(ValueError):
    """Raised when the cube is asked to roll somewhere it cannot go."""

    def __init__(self, row: int, col: int, reason: str):
        super().__init__(f"Cannot move cube to ({row}, {col}): {reason}")
        self.row = row
        self.col = col
        self.reason = reason


class PuzzleState:
    """A cube on a square grid of painted and unpainted squares.

    The cube sits at (``cube_row``, ``cube_col``). Its faces are numbered:

    * 0: vertical, toward row 0 (nearest the player)
    * 1: vertical, toward the last row
    * 2: vertical, toward column 0
    * 3: vertical, toward the last column
    * 4: bottom
    * 5: top

    Every mutation notifies the listeners registered on this instance with
    ``add_listener``. Listeners are called synchronously as ``fn(state)``
    once the state is consistent, and must not mutate the state themselves.
    """

    def __init__(
        self,
        side: int = DEFAULT_SIDE,
        row0: int = 0,
        col0: int = 0,
        board: Board | Sequence[Sequence[bool]] | None = None,
        face_painted: Sequence[bool] | None = None,
    ) -> None:
        self._changed = Signal()
        self._side = DEFAULT_SIDE
        self._row = 0
        self._col = 0
        self._board = Board(side=DEFAULT_SIDE)
        self._faces: List[bool] = [False] * FACE_COUNT
        self._moves = 0
        self.initialize(side, row0, col0, board if board is not None else Board(side=side), face_painted)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_listener(self, fn: Listener) -> None:
        self._changed.connect(fn, weak=False)

    def remove_listener(self, fn: Listener) -> None:
        self._changed.disconnect(fn)

    def _notify(self) -> None:
        self._changed.send(self)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def initialize(
        self,
        side: int,
        row0: int,
        col0: int,
        board: Board | Sequence[Sequence[bool]],
        face_painted: Sequence[bool] | None = None,
    ) -> None:
        """Start a SIDE x SIDE puzzle with the cube at ROW0, COL0.

        Square (r, c) is painted iff ``board[r][c]``; face k is painted iff
        ``face_painted[k]`` (all faces blank when omitted). The board is copied,
        so later changes to the caller's grid do not leak into the puzzle.
        """
        if side < MIN_SIDE:
            raise ValueError(f"Board side must be at least {MIN_SIDE}, got {side}")
        if isinstance(board, Board):
            new_board = board.copy()
        else:
            new_board = Board.from_rows(board)
        if new_board.side != side:
            raise ValueError(f"Board must be {side}x{side}, got {new_board.side} rows")
        if not new_board.in_bounds(row0, col0):
            raise ValueError(f"Start square ({row0}, {col0}) is off the {side}x{side} board")
        if face_painted is None:
            faces = [False] * FACE_COUNT
        else:
            faces = [bool(face) for face in face_painted]
            if len(faces) != FACE_COUNT:
                raise ValueError(f"Cube needs exactly {FACE_COUNT} faces, got {len(faces)}")

        self._side = side
        self._row = row0
        self._col = col0
        self._board = new_board
        self._faces = faces
        self._moves = 0
        self._notify()

    def copy_from(self, other: PuzzleState) -> None:
        """Make this puzzle an independent copy of OTHER (board included)."""
        self._side = other._side
        self._row = other._row
        self._col = other._col
        self._board = other._board.copy()
        self._faces = list(other._faces)
        self._moves = other._moves
        self._notify()

    def copy(self) -> PuzzleState:
        clone = PuzzleState()
        clone.copy_from(self)
        return clone

    def move(self, row: int, col: int) -> None:
        """Roll the cube onto (ROW, COL), one step from its current square.

        After the roll, paint moves between the bottom face and the square
        only if exactly one of them is painted. Raises InvalidMove, leaving
        the state unchanged, if the target is off the board or not adjacent.
        """
        if not self._board.in_bounds(row, col):
            raise InvalidMove(row, col, "off the board")
        permutation = ROLL_PERMUTATIONS.get((row - self._row, col - self._col))
        if permutation is None:
            raise InvalidMove(row, col, "not adjacent to the cube")

        self._faces = [self._faces[old] for old in permutation]
        self._row = row
        self._col = col
        square = self._board.painted[row][col]
        if self._faces[FACE_BOTTOM] != square:
            self._faces[FACE_BOTTOM] = square
            self._board.painted[row][col] = not square
        self._moves += 1
        self._notify()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def side(self) -> int:
        return self._side

    @property
    def cube_row(self) -> int:
        return self._row

    @property
    def cube_col(self) -> int:
        return self._col

    @property
    def position(self) -> Tuple[int, int]:
        return self._row, self._col

    @property
    def moves(self) -> int:
        """Number of moves made on the current puzzle."""
        return self._moves

    @property
    def faces(self) -> Tuple[bool, ...]:
        return tuple(self._faces)

    def is_painted_square(self, row: int, col: int) -> bool:
        return self._board.is_painted(row, col)

    def painted_squares(self) -> List[Tuple[int, int]]:
        return self._board.painted_cells()

    def is_painted_face(self, face: int) -> bool:
        if not 0 <= face < FACE_COUNT:
            raise IndexError(f"Face index must be in [0, {FACE_COUNT}), got {face}")
        return self._faces[face]

    def all_faces_painted(self) -> bool:
        return all(self._faces)

    def __repr__(self) -> str:
        return (
            f"PuzzleState(side={self._side}, position={self.position}, "
            f"faces={self.faces}, moves={self._moves})"
        )
