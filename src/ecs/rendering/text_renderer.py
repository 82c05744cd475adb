from __future__ import annotations

from typing import List

from ecs.components.puzzle_state import PuzzleState
from ecs.constants import FACE_NAMES

PAINTED = "#"
BLANK = "."
CUBE = "C"


class TextBoardRenderer:
    """Draws a PuzzleState as plain text.

    Row 0 is the row nearest the player, so it is printed last (at the bottom),
    matching the face naming of the cube.
    """

    def __init__(self, painted: str = PAINTED, blank: str = BLANK, cube: str = CUBE):
        self._painted = painted
        self._blank = blank
        self._cube = cube

    def render_board(self, state: PuzzleState) -> List[str]:
        side = state.side
        label_width = len(str(side - 1))
        lines: List[str] = []
        for row in reversed(range(side)):
            cells = []
            for col in range(side):
                if (row, col) == state.position:
                    cells.append(self._cube)
                elif state.is_painted_square(row, col):
                    cells.append(self._painted)
                else:
                    cells.append(self._blank)
            lines.append(f"{row:>{label_width}} | " + " ".join(cells))
        lines.append(" " * label_width + " +-" + "-" * (2 * side - 1))
        lines.append(" " * (label_width + 3) + " ".join(str(col % 10) for col in range(side)))
        return lines

    def render_faces(self, state: PuzzleState) -> str:
        marks = (
            f"{name}={self._painted if state.is_painted_face(face) else self._blank}"
            for face, name in FACE_NAMES.items()
        )
        return "Faces: " + " ".join(marks)

    def render(self, state: PuzzleState) -> str:
        lines = self.render_board(state)
        lines.append(self.render_faces(state))
        lines.append(f"Moves: {state.moves}")
        return "\n".join(lines)
