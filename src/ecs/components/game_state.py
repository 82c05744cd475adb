"""Game state resource describing the active puzzle session."""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from ecs.constants import DEFAULT_SIDE


class GameMode(Enum):
    """Whether the current puzzle still accepts moves."""
    PLAYING = auto()
    SOLVED = auto()


@dataclass
class GameState:
    """Singleton component storing the session mode and configuration."""
    mode: GameMode = GameMode.PLAYING
    side: int = DEFAULT_SIDE
    seed: Optional[int] = None
