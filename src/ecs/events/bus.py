from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references so systems not kept in a variable still receive events.
        sig.connect(fn, weak=False)

    def unsubscribe(self, name: str, fn):
        sig = self._signals.get(name)
        if sig:
            sig.disconnect(fn)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & COMMANDS
# ============================================================================
EVENT_PUZZLE_COMMAND = "puzzle_command"    # payload: command=PuzzleCommand
EVENT_QUIT_REQUESTED = "quit_requested"    # payload: None


# ============================================================================
# PUZZLE STATE
# ============================================================================
EVENT_PUZZLE_CHANGED = "puzzle_changed"    # payload: state=PuzzleState
EVENT_PUZZLE_RESET = "puzzle_reset"        # payload: side=int, row=int, col=int, painted=list[(r,c)]
EVENT_MOVE_REJECTED = "move_rejected"      # payload: row=int, col=int, reason=str
EVENT_PUZZLE_SOLVED = "puzzle_solved"      # payload: moves=int


# ============================================================================
# GAME FLOW & STATE
# ============================================================================
EVENT_GAME_MODE_CHANGED = "game_mode_changed"  # payload: previous_mode=GameMode|None, new_mode=GameMode
