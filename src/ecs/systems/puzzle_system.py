from __future__ import annotations

import logging
import random

from esper import World

from ecs.commands import CellClicked, NewPuzzle, PuzzleCommand, Quit, SetSeed, SetSize
from ecs.components.game_state import GameMode, GameState
from ecs.components.puzzle_state import InvalidMove, PuzzleState
from ecs.constants import MIN_SIDE, PAINTED_SQUARE_COUNT
from ecs.events.bus import (
    EventBus,
    EVENT_MOVE_REJECTED,
    EVENT_PUZZLE_CHANGED,
    EVENT_PUZZLE_COMMAND,
    EVENT_PUZZLE_RESET,
    EVENT_PUZZLE_SOLVED,
    EVENT_QUIT_REQUESTED,
)
from ecs.systems.board_setup import random_puzzle_layout
from ecs.utils.game_state import get_game_state, set_game_mode

logger = logging.getLogger(__name__)


class PuzzleSystem:
    """Drives the cube puzzle from player commands.

    Owns the single PuzzleState entity. Listens for EVENT_PUZZLE_COMMAND,
    relays every state change as EVENT_PUZZLE_CHANGED, and announces a win
    with EVENT_PUZZLE_SOLVED. Once solved, clicks are ignored until a new
    puzzle is started.
    """

    def __init__(
        self,
        world: World,
        event_bus: EventBus,
        *,
        side: int | None = None,
        rng: random.Random | None = None,
        painted_count: int = PAINTED_SQUARE_COUNT,
    ) -> None:
        self.world = world
        self.event_bus = event_bus
        self._rng: random.Random = rng or getattr(world, "random", None) or random.Random()
        self._painted_count = painted_count
        state = get_game_state(world)
        if state is None:
            state = GameState()
            world.create_entity(state)
        self.puzzle = PuzzleState()
        self.puzzle.add_listener(self._on_puzzle_changed)
        self.puzzle_entity = self.world.create_entity(self.puzzle)
        self.event_bus.subscribe(EVENT_PUZZLE_COMMAND, self.on_command)
        self.new_puzzle(side)

    @property
    def side(self) -> int:
        return self._game_state().side

    @property
    def solved(self) -> bool:
        return self._game_state().mode == GameMode.SOLVED

    def on_command(self, sender, **kwargs):
        command = kwargs.get('command')
        if command is None:
            return
        self.handle(command)

    def handle(self, command: PuzzleCommand) -> None:
        match command:
            case CellClicked(row=row, col=col):
                self.click(row, col)
            case NewPuzzle():
                self.new_puzzle()
            case SetSeed(seed=seed):
                self.set_seed(seed)
            case SetSize(side=side):
                self.set_size(side)
            case Quit():
                self.event_bus.emit(EVENT_QUIT_REQUESTED)
            case _:
                raise TypeError(f"Unsupported puzzle command: {command!r}")

    def new_puzzle(self, side: int | None = None) -> None:
        """Replace the current puzzle with a random one.

        SIDE defaults to the configured side. A new SIDE is stored only once a
        board of that size has been generated, so a rejected size leaves the
        configuration and the current puzzle as they were.
        """
        if side is None:
            side = self.side
        layout = random_puzzle_layout(side, self._rng, painted_count=self._painted_count)
        set_game_mode(self.world, self.event_bus, GameMode.PLAYING)
        row0, col0 = layout.start
        self.puzzle.initialize(side, row0, col0, layout.build_board())
        self._game_state().side = side
        logger.info("New %dx%d puzzle, cube at (%d, %d)", side, side, row0, col0)
        self.event_bus.emit(
            EVENT_PUZZLE_RESET,
            side=side,
            row=row0,
            col=col0,
            painted=list(layout.painted),
        )

    def set_seed(self, seed: int) -> None:
        # Takes effect from the next generated puzzle.
        self._rng.seed(seed)
        self._game_state().seed = seed

    def set_size(self, side: int) -> None:
        if side < MIN_SIDE:
            raise ValueError(f"Board side must be at least {MIN_SIDE}, got {side}")
        self.new_puzzle(side)

    def click(self, row: int, col: int) -> None:
        if self.solved:
            return
        try:
            self.puzzle.move(row, col)
        except InvalidMove as exc:
            self.event_bus.emit(EVENT_MOVE_REJECTED, row=row, col=col, reason=exc.reason)
            return
        logger.debug("Cube rolled to (%d, %d); faces=%s", row, col, self.puzzle.faces)
        if self.puzzle.all_faces_painted():
            set_game_mode(self.world, self.event_bus, GameMode.SOLVED)
            logger.info("Puzzle solved in %d moves", self.puzzle.moves)
            self.event_bus.emit(EVENT_PUZZLE_SOLVED, moves=self.puzzle.moves)

    def _on_puzzle_changed(self, sender):
        self.event_bus.emit(EVENT_PUZZLE_CHANGED, state=sender)

    def _game_state(self) -> GameState:
        state = get_game_state(self.world)
        if state is None:
            raise RuntimeError("GameState resource not found")
        return state
