from dataclasses import dataclass, field
from typing import Iterable, List, Sequence, Tuple

@dataclass(slots=True)
class Board:
    """Square grid of painted/unpainted cells, indexed ``painted[row][col]``."""
    side: int
    painted: List[List[bool]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.painted:
            self.painted = [[False] * self.side for _ in range(self.side)]
        elif len(self.painted) != self.side or any(len(row) != self.side for row in self.painted):
            raise ValueError(f"Board must be {self.side}x{self.side}")
        else:
            self.painted = [[bool(cell) for cell in row] for row in self.painted]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> "Board":
        return cls(side=len(rows), painted=[list(row) for row in rows])

    @classmethod
    def with_painted(cls, side: int, cells: Iterable[Tuple[int, int]]) -> "Board":
        board = cls(side=side)
        for row, col in cells:
            board.set_painted(row, col, True)
        return board

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.side and 0 <= col < self.side

    def is_painted(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the {self.side}x{self.side} board")
        return self.painted[row][col]

    def set_painted(self, row: int, col: int, value: bool) -> None:
        if not self.in_bounds(row, col):
            raise IndexError(f"Square ({row}, {col}) is off the {self.side}x{self.side} board")
        self.painted[row][col] = bool(value)

    def painted_cells(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self.side)
            for c in range(self.side)
            if self.painted[r][c]
        ]

    def copy(self) -> "Board":
        return Board(side=self.side, painted=[list(row) for row in self.painted])
