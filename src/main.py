"""Entry point for the Cube Roll puzzle.

Sets up ECS world, event bus, the puzzle system, and a console front end.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, TextIO

from ecs.commands import HELP_TEXT, parse_command
from ecs.constants import DEFAULT_SIDE
from ecs.events.bus import (
    EventBus,
    EVENT_MOVE_REJECTED,
    EVENT_PUZZLE_CHANGED,
    EVENT_PUZZLE_COMMAND,
    EVENT_PUZZLE_SOLVED,
    EVENT_QUIT_REQUESTED,
)
from ecs.rendering.text_renderer import TextBoardRenderer
from ecs.systems.puzzle_system import PuzzleSystem
from ecs.world import create_world


class CubeRollConsole:
    def __init__(self, side: int = DEFAULT_SIDE, seed: int | None = None, out: TextIO | None = None):
        self.out = out or sys.stdout
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus, side=side, seed=seed)
        self.renderer = TextBoardRenderer()
        self.running = True
        self.event_bus.subscribe(EVENT_PUZZLE_CHANGED, self.on_puzzle_changed)
        self.event_bus.subscribe(EVENT_MOVE_REJECTED, self.on_move_rejected)
        self.event_bus.subscribe(EVENT_PUZZLE_SOLVED, self.on_puzzle_solved)
        self.event_bus.subscribe(EVENT_QUIT_REQUESTED, self.on_quit)
        self.puzzle_system = PuzzleSystem(self.world, self.event_bus)

    def on_puzzle_changed(self, sender, **kwargs):
        state = kwargs.get('state')
        if state is None:
            return
        self.write(self.renderer.render(state))

    def on_move_rejected(self, sender, **kwargs):
        self.write(f"Illegal move to ({kwargs.get('row')}, {kwargs.get('col')}): {kwargs.get('reason')}")

    def on_puzzle_solved(self, sender, **kwargs):
        self.write(f"Finished in {kwargs.get('moves')} moves.")

    def on_quit(self, sender, **kwargs):
        self.running = False

    def write(self, text: str) -> None:
        print(text, file=self.out)

    def feed(self, line: str) -> None:
        if not line.strip():
            return
        if line.strip().lower() in ("help", "?"):
            self.write(HELP_TEXT)
            return
        try:
            command = parse_command(line)
            self.event_bus.emit(EVENT_PUZZLE_COMMAND, command=command)
        except ValueError as exc:
            self.write(str(exc))

    def run(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.feed(line)
            if not self.running:
                break


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cuberoll",
        description="Roll a cube over a grid until every face is painted.",
        epilog=HELP_TEXT,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--size", "-s", type=int, default=DEFAULT_SIDE, help="Board side length (at least 3)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for board generation")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        console = CubeRollConsole(side=args.size, seed=args.seed)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    console.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())
