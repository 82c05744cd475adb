import pytest
from esper import World

from ecs.commands import CellClicked, NewPuzzle, Quit, SetSeed, SetSize
from ecs.components.board import Board
from ecs.components.game_state import GameMode, GameState
from ecs.components.puzzle_state import PuzzleState
from ecs.events.bus import (
    EventBus,
    EVENT_GAME_MODE_CHANGED,
    EVENT_MOVE_REJECTED,
    EVENT_PUZZLE_CHANGED,
    EVENT_PUZZLE_COMMAND,
    EVENT_PUZZLE_RESET,
    EVENT_PUZZLE_SOLVED,
    EVENT_QUIT_REQUESTED,
)
from ecs.systems.puzzle_system import PuzzleSystem
from ecs.utils.game_state import set_game_mode
from ecs.world import create_world

SOLVING_PATH = [(0, 1), (0, 2), (0, 3), (1, 3), (1, 4), (1, 5)]


def _capture(bus, name):
    events = []

    def handler(sender, **kwargs):
        events.append(kwargs)

    bus.subscribe(name, handler)
    return events


def _setup(side=4, seed=11):
    bus = EventBus()
    world = create_world(bus, side=side, seed=seed)
    system = PuzzleSystem(world, bus)
    return bus, world, system


def test_system_creates_puzzle_entity_with_random_board():
    bus, world, system = _setup()
    puzzles = list(world.get_component(PuzzleState))
    assert len(puzzles) == 1
    ent, puzzle = puzzles[0]
    assert ent == system.puzzle_entity and puzzle is system.puzzle
    assert puzzle.side == 4
    assert puzzle.moves == 0
    assert len(puzzle.painted_squares()) == 6
    assert not system.solved


def test_same_seed_gives_same_puzzle():
    _, _, first = _setup(seed=99)
    _, _, second = _setup(seed=99)
    assert first.puzzle.position == second.puzzle.position
    assert first.puzzle.painted_squares() == second.puzzle.painted_squares()


def test_click_command_moves_cube_and_relays_change():
    bus, world, system = _setup()
    system.puzzle.initialize(4, 0, 0, Board.with_painted(4, [(0, 1)]))
    changed = _capture(bus, EVENT_PUZZLE_CHANGED)
    bus.emit(EVENT_PUZZLE_COMMAND, command=CellClicked(0, 1))
    assert system.puzzle.position == (0, 1)
    assert system.puzzle.is_painted_face(4)
    assert changed == [{"state": system.puzzle}]


def test_illegal_click_is_reported_not_raised():
    bus, world, system = _setup()
    system.puzzle.initialize(4, 0, 0, Board(side=4))
    changed = _capture(bus, EVENT_PUZZLE_CHANGED)
    rejected = _capture(bus, EVENT_MOVE_REJECTED)
    bus.emit(EVENT_PUZZLE_COMMAND, command=CellClicked(1, 1))
    bus.emit(EVENT_PUZZLE_COMMAND, command=CellClicked(0, 9))
    assert [(e["row"], e["col"]) for e in rejected] == [(1, 1), (0, 9)]
    assert rejected[1]["reason"] == "off the board"
    assert changed == []
    assert system.puzzle.moves == 0


def test_solving_switches_mode_and_ignores_further_clicks():
    bus, world, system = _setup(side=6)
    system.puzzle.initialize(6, 0, 0, Board.with_painted(6, SOLVING_PATH))
    solved = _capture(bus, EVENT_PUZZLE_SOLVED)
    modes = _capture(bus, EVENT_GAME_MODE_CHANGED)
    rejected = _capture(bus, EVENT_MOVE_REJECTED)
    for row, col in SOLVING_PATH:
        system.handle(CellClicked(row, col))
    assert solved == [{"moves": 6}]
    assert system.solved
    assert modes == [{"previous_mode": GameMode.PLAYING, "new_mode": GameMode.SOLVED}]

    system.handle(CellClicked(2, 5))
    system.handle(CellClicked(4, 4))
    assert system.puzzle.moves == 6
    assert rejected == []


def test_new_puzzle_resets_progress():
    bus, world, system = _setup(side=6)
    system.puzzle.initialize(6, 0, 0, Board.with_painted(6, SOLVING_PATH))
    for row, col in SOLVING_PATH:
        system.handle(CellClicked(row, col))
    resets = _capture(bus, EVENT_PUZZLE_RESET)
    bus.emit(EVENT_PUZZLE_COMMAND, command=NewPuzzle())
    assert not system.solved
    assert system.puzzle.moves == 0
    assert system.puzzle.faces == (False,) * 6
    assert len(resets) == 1
    assert resets[0]["side"] == 6
    assert (resets[0]["row"], resets[0]["col"]) == system.puzzle.position
    assert resets[0]["painted"] == system.puzzle.painted_squares()


def test_set_size_rebuilds_board():
    bus, world, system = _setup()
    system.handle(SetSize(7))
    assert system.side == 7
    assert system.puzzle.side == 7
    state = next(iter(world.get_component(GameState)))[1]
    assert state.side == 7


def test_set_size_rejects_small_boards():
    bus, world, system = _setup()
    with pytest.raises(ValueError):
        system.handle(SetSize(2))
    assert system.puzzle.side == 4


def test_rejected_size_keeps_configured_side():
    bus = EventBus()
    world = create_world(bus, seed=11)
    system = PuzzleSystem(world, bus, painted_count=10)
    with pytest.raises(ValueError):
        system.handle(SetSize(3))
    assert system.side == system.puzzle.side == 4
    system.handle(NewPuzzle())
    assert system.puzzle.side == 4
    assert len(system.puzzle.painted_squares()) == 10


def test_rejected_initial_side_is_not_stored():
    bus = EventBus()
    world = create_world(bus, seed=11)
    with pytest.raises(ValueError):
        PuzzleSystem(world, bus, side=2)
    state = next(iter(world.get_component(GameState)))[1]
    assert state.side == 4


def test_initial_side_argument_overrides_world_default():
    bus = EventBus()
    world = create_world(bus, seed=11)
    system = PuzzleSystem(world, bus, side=5)
    assert system.side == system.puzzle.side == 5


def test_set_game_mode_requires_game_state():
    with pytest.raises(RuntimeError):
        set_game_mode(World(), EventBus(), GameMode.SOLVED)


def test_set_seed_makes_next_puzzle_reproducible():
    _, world_a, first = _setup(seed=1)
    _, world_b, second = _setup(seed=2)
    for system in (first, second):
        system.handle(SetSeed(5))
        system.handle(NewPuzzle())
    assert first.puzzle.position == second.puzzle.position
    assert first.puzzle.painted_squares() == second.puzzle.painted_squares()
    state = next(iter(world_a.get_component(GameState)))[1]
    assert state.seed == 5


def test_quit_command_emits_request():
    bus, world, system = _setup()
    quits = _capture(bus, EVENT_QUIT_REQUESTED)
    bus.emit(EVENT_PUZZLE_COMMAND, command=Quit())
    assert quits == [{}]


def test_unknown_command_is_refused():
    bus, world, system = _setup()
    with pytest.raises(TypeError):
        system.handle("north")
