"""Commands accepted by the puzzle controller, and a parser for console input."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class CommandError(ValueError):
    """Raised when console input does not name a known command."""


@dataclass(frozen=True, slots=True)
class NewPuzzle:
    pass


@dataclass(frozen=True, slots=True)
class SetSeed:
    seed: int


@dataclass(frozen=True, slots=True)
class SetSize:
    side: int


@dataclass(frozen=True, slots=True)
class Quit:
    pass


@dataclass(frozen=True, slots=True)
class CellClicked:
    row: int
    col: int


PuzzleCommand = Union[NewPuzzle, SetSeed, SetSize, Quit, CellClicked]

HELP_TEXT = (
    "Commands:\n"
    "  ROW COL | move ROW COL   roll the cube onto square ROW, COL\n"
    "  new                      start a new random puzzle\n"
    "  size N                   start a new N x N puzzle\n"
    "  seed N                   reseed the board generator\n"
    "  quit                     exit"
)


def _parse_int(token: str, what: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise CommandError(f"{what} must be an integer, got {token!r}") from None


def parse_command(text: str) -> PuzzleCommand:
    """Translate one line of console input into a command."""
    tokens = text.replace(",", " ").split()
    if not tokens:
        raise CommandError("Empty command")
    head = tokens[0].lower()
    args = tokens[1:]
    match head, args:
        case ("new", []):
            return NewPuzzle()
        case ("quit" | "q" | "exit", []):
            return Quit()
        case ("seed", [value]):
            return SetSeed(_parse_int(value, "Seed"))
        case ("size", [value]):
            return SetSize(_parse_int(value, "Size"))
        case ("move", [row, col]):
            return CellClicked(_parse_int(row, "Row"), _parse_int(col, "Column"))
        case (row, [col]) if row.lstrip("-").isdigit():
            return CellClicked(_parse_int(row, "Row"), _parse_int(col, "Column"))
    raise CommandError(f"Unknown command: {text.strip()!r}")
